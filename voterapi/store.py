"""
In-memory voter store.

Holds every VoterRecord keyed by voter id. Data is lost on restart.
A single lock serializes all access because the WSGI server handles
requests on worker threads.
"""

import copy
import logging
import threading

from .exceptions import VoterAlreadyExists, VoterNotFound, VoteEntryNotFound
from .models.voter import VoteRecord, VoterRecord

logger = logging.getLogger(__name__)


class VoterStore:
    def __init__(self):
        self._lock = threading.Lock()
        # voter_id -> VoterRecord
        self._voters: dict[int, VoterRecord] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._voters)

    def __contains__(self, voter_id) -> bool:
        with self._lock:
            return voter_id in self._voters

    def add(self, voter: VoterRecord) -> None:
        with self._lock:
            if voter.voter_id in self._voters:
                raise VoterAlreadyExists(voter.voter_id)
            self._voters[voter.voter_id] = copy.deepcopy(voter)
        logger.debug("Added voter %s", voter.voter_id)

    def update(self, voter: VoterRecord) -> None:
        """Replace a stored voter wholesale, history included."""
        with self._lock:
            if voter.voter_id not in self._voters:
                raise VoterNotFound(voter.voter_id)
            self._voters[voter.voter_id] = copy.deepcopy(voter)
        logger.debug("Updated voter %s", voter.voter_id)

    def delete(self, voter_id: int) -> None:
        # Missing ids are a no-op.
        with self._lock:
            self._voters.pop(voter_id, None)

    def delete_all(self) -> None:
        with self._lock:
            self._voters = {}
        logger.debug("Cleared all voters")

    def get(self, voter_id: int) -> VoterRecord:
        with self._lock:
            return copy.deepcopy(self._require(voter_id))

    def get_all(self) -> list[VoterRecord]:
        with self._lock:
            return [copy.deepcopy(v) for v in self._voters.values()]

    def get_history(self, voter_id: int) -> list[VoteRecord]:
        with self._lock:
            return copy.deepcopy(self._require(voter_id).history)

    def get_history_entry(self, voter_id: int, poll_id: int) -> VoteRecord:
        with self._lock:
            vote = self._require(voter_id).find_vote(poll_id)
            if vote is None:
                raise VoteEntryNotFound(voter_id, poll_id)
            return copy.deepcopy(vote)

    def add_history_entry(self, voter_id: int, vote: VoteRecord) -> None:
        with self._lock:
            self._require(voter_id).history.append(copy.deepcopy(vote))
        logger.debug("Appended poll %s to voter %s", vote.poll_id, voter_id)

    def _require(self, voter_id: int) -> VoterRecord:
        voter = self._voters.get(voter_id)
        if voter is None:
            raise VoterNotFound(voter_id)
        return voter
