"""Per-connection game session.

A session exists from joinGame until the connection closes:

    unjoined --joinGame--> active --close--> destroyed

While active it accepts any number of answers; there is no game-over state.
"""

from dataclasses import dataclass, field

from academy.models import AnswerFeedback, SessionState, utc_timestamp

BONUS_STREAK = 3
BONUS_POINTS = 50


class SessionClosedError(RuntimeError):
    """Raised when an answer is applied to a destroyed session."""


@dataclass
class Session:
    session_id: str
    player_name: str
    score: float = 0
    streak: int = 0
    previous_score: float = 0
    state: SessionState = SessionState.ACTIVE
    started_at: str = field(default_factory=utc_timestamp)

    @classmethod
    def join(cls, session_id: str, player_name: str) -> 'Session':
        return cls(session_id=session_id, player_name=player_name)

    @property
    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def submit_answer(self, is_correct: bool, points=0) -> AnswerFeedback:
        """Apply one answer. Points are trusted as sent by the client."""
        if not self.is_active:
            raise SessionClosedError(f'session {self.session_id} is {self.state.value}')
        if is_correct:
            self.score += points
            self.streak += 1
        else:
            self.streak = 0
        return AnswerFeedback(
            correct=bool(is_correct),
            new_score=self.score,
            streak=self.streak,
            bonus_points=BONUS_POINTS if self.streak >= BONUS_STREAK else 0,
        )

    def destroy(self) -> None:
        self.state = SessionState.DESTROYED
