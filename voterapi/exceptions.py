"""Exceptions raised by the voter store and the HTTP layer."""

from werkzeug.exceptions import BadRequest


class VoterStoreError(Exception):
    """Base exception for all store failures."""


class VoterAlreadyExists(VoterStoreError):
    def __init__(self, voter_id: int):
        self.voter_id = voter_id
        super().__init__(f"voter {voter_id} already exists")


class VoterNotFound(VoterStoreError):
    def __init__(self, voter_id: int):
        self.voter_id = voter_id
        super().__init__(f"voter {voter_id} does not exist")


class VoteEntryNotFound(VoterStoreError):
    def __init__(self, voter_id: int, poll_id: int):
        self.voter_id = voter_id
        self.poll_id = poll_id
        super().__init__(f"poll {poll_id} does not exist for voter {voter_id}")


class InvalidIdentifier(BadRequest):
    """Path segment that is not a non-negative decimal integer."""

    def __init__(self, name: str, raw: str):
        super().__init__(description={
            "code": "INVALID_IDENTIFIER",
            "message": f"'{name}' must be a non-negative integer",
            "details": {name: raw},
        })


class MalformedBody(BadRequest):
    """Request body that is not JSON, or does not fit the expected record."""

    def __init__(self, errors=None):
        super().__init__(description={
            "code": "MALFORMED_BODY",
            "message": "Request body is not a valid record",
            "errors": errors,
        })
