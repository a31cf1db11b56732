from .voter import VoteRecord, VoterRecord  # noqa: F401

__all__ = [
    "VoteRecord",
    "VoterRecord",
]
