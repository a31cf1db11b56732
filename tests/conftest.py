import pytest

from voterapi import create_app
from voterapi.config import TestingConfig
from voterapi.store import VoterStore


@pytest.fixture
def store():
    return VoterStore()


@pytest.fixture
def app(store):
    return create_app(TestingConfig, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


def make_voter_payload(voter_id, name="Ada Lovelace", email="ada@example.com", polls=()):
    return {
        "VoterId": voter_id,
        "Name": name,
        "Email": email,
        "VoteHistory": [
            {"PollId": poll_id, "VoteId": poll_id, "VoteDate": "2024-11-05T14:30:00Z"}
            for poll_id in polls
        ],
    }
