from dataclasses import dataclass, field
from datetime import datetime, timezone

# Unset vote timestamps carry this value.
ZERO_DATE = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class VoteRecord:
    poll_id: int = 0
    vote_id: int = 0
    vote_date: datetime = ZERO_DATE


@dataclass
class VoterRecord:
    voter_id: int = 0
    name: str = ""
    email: str = ""
    history: list[VoteRecord] = field(default_factory=list)

    def find_vote(self, poll_id: int) -> VoteRecord | None:
        # First match wins; duplicate poll ids are allowed in the history.
        for vote in self.history:
            if vote.poll_id == poll_id:
                return vote
        return None
