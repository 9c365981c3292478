"""Ranked best-score-per-player leaderboard.

State is process-lifetime only. Entries are keyed by display name; a name's
entry is replaced only by a strictly higher score. The collection is kept
sorted by score descending (stable) and truncated after every mutation.
"""

import math
from numbers import Real
from typing import Dict, List

from academy.models import LeaderboardEntry
from .ranking import classify_rank

DEFAULT_MAX_ENTRIES = 100


class InvalidScoreError(ValueError):
    """Raised when a submission has no usable name or a non-numeric score."""


def _is_valid_score(score) -> bool:
    # bool is a Real subclass but never a score
    return isinstance(score, Real) and not isinstance(score, bool) and math.isfinite(score)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class LeaderboardStore:
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self.max_entries = max_entries
        self._entries: List[LeaderboardEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def upsert(self, name, score, level=1) -> str:
        """Record a score for ``name`` and return the rank label for ``score``.

        Ties and lower scores leave the stored entry untouched but still
        succeed. Raises InvalidScoreError before mutating anything.
        """
        if not isinstance(name, str) or not name:
            raise InvalidScoreError('name must be non-empty text')
        if not _is_valid_score(score):
            raise InvalidScoreError('score must be a finite number')

        entry = LeaderboardEntry(name=name, score=score, level=level)
        index = self._index_of(name)
        if index is None:
            self._entries.append(entry)
        elif score > self._entries[index].score:
            self._entries[index] = entry

        self._entries.sort(key=lambda e: e.score, reverse=True)
        del self._entries[self.max_entries:]
        return classify_rank(score)

    def top(self, n: int) -> List[LeaderboardEntry]:
        return list(self._entries[:max(0, n)])

    def top_dicts(self, n: int) -> List[dict]:
        return [e.to_dict() for e in self.top(n)]

    def get(self, name: str):
        index = self._index_of(name)
        return self._entries[index] if index is not None else None

    def stats(self) -> Dict[str, float]:
        count = len(self._entries)
        if not count:
            return {'count': 0, 'highScore': 0, 'averageScore': 0}
        total = sum(e.score for e in self._entries)
        return {
            'count': count,
            'highScore': self._entries[0].score,
            'averageScore': _round_half_up(total / count),
        }

    def _index_of(self, name: str):
        for i, entry in enumerate(self._entries):
            if entry.name == name:
                return i
        return None
