from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-01-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class SessionState(str, Enum):
    UNJOINED = 'unjoined'    # connection open, no joinGame yet
    ACTIVE = 'active'
    DESTROYED = 'destroyed'  # connection closed


@dataclass
class LeaderboardEntry:
    name: str
    score: float
    level: object = 1
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self):
        return {
            'name': self.name,
            'score': self.score,
            'level': self.level,
            'timestamp': self.timestamp,
        }


@dataclass
class AnswerFeedback:
    correct: bool
    new_score: float
    streak: int
    bonus_points: int

    def to_dict(self):
        return {
            'correct': self.correct,
            'newScore': self.new_score,
            'streak': self.streak,
            'bonusPoints': self.bonus_points,
        }
