"""Real-time message protocol.

Every message is a JSON object with a ``type`` tag. Inbound kinds form a
closed set routed through GameProtocolDispatcher; anything else is logged
and ignored.
"""

import json
import math
from enum import Enum
from numbers import Real

from academy.services.achievements import evaluate_achievements
from academy.services.hints import lookup_hint


class MessageType(str, Enum):
    JOIN_GAME = 'joinGame'
    SUBMIT_ANSWER = 'submitAnswer'
    REQUEST_HINT = 'requestHint'


class MalformedMessageError(ValueError):
    """Raised for payloads that are not a JSON object of the expected shape."""


def decode_message(raw) -> dict:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise MalformedMessageError(f'undecodable payload: {exc}') from exc
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise MalformedMessageError(f'invalid JSON: {exc}') from exc
    if not isinstance(raw, dict):
        raise MalformedMessageError(f'expected a JSON object, got {type(raw).__name__}')
    return raw


# ---- Outbound messages ----

def connected_message(session_id, leaderboard, stats):
    return {'type': 'connected', 'sessionId': session_id, 'leaderboard': leaderboard, 'stats': stats}


def game_joined_message(player_name):
    return {'type': 'gameJoined', 'playerName': player_name}


def answer_feedback_message(feedback):
    return dict({'type': 'answerFeedback'}, **feedback.to_dict())


def hint_message(text):
    return {'type': 'hint', 'message': text}


def achievements_message(notices):
    return {'type': 'achievements', 'achievements': list(notices)}


def _is_points(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value) and value >= 0


class GameProtocolDispatcher:
    def __init__(self, ctx, logger):
        self.ctx = ctx
        self.logger = logger
        self.routes = {
            MessageType.JOIN_GAME: self.handle_join_game,
            MessageType.SUBMIT_ANSWER: self.handle_submit_answer,
            MessageType.REQUEST_HINT: self.handle_request_hint,
        }

    def dispatch(self, identity: str, raw) -> bool:
        """Route one inbound message. Returns False if it was dropped or ignored."""
        try:
            message = decode_message(raw)
        except MalformedMessageError as exc:
            self.logger.warning(f"[protocol] malformed message from {identity}: {exc}")
            return False

        tag = message.get('type')
        try:
            kind = MessageType(tag)
        except ValueError:
            self.logger.info(f"[protocol] unknown message type {tag!r} from {identity}")
            return False

        try:
            self.routes[kind](identity, message)
        except MalformedMessageError as exc:
            self.logger.warning(f"[protocol] dropped {kind.value} from {identity}: {exc}")
            return False
        return True

    def handle_join_game(self, identity, message):
        player_name = message.get('playerName')
        if not isinstance(player_name, str) or not player_name:
            raise MalformedMessageError('playerName is required')
        session = self.ctx.registry.join(identity, player_name)
        self.logger.info(f"[join] session={identity} player={player_name!r} started={session.started_at}")
        self.ctx.hub.send(identity, game_joined_message(player_name))

    def handle_submit_answer(self, identity, message):
        session = self.ctx.registry.session_for(identity)
        if session is None:
            self.logger.debug(f"[answer] session={identity} has not joined; ignored")
            return
        is_correct = bool(message.get('isCorrect'))
        points = message.get('points', 0)
        if is_correct and not _is_points(points):
            raise MalformedMessageError(f'points must be a non-negative number, got {points!r}')

        feedback = session.submit_answer(is_correct, points if is_correct else 0)
        self.logger.debug(
            f"[answer] session={identity} level={message.get('level')} question={message.get('question')} "
            f"correct={is_correct} score={feedback.new_score} streak={feedback.streak}"
        )
        self.ctx.hub.send(identity, answer_feedback_message(feedback))

        notices = evaluate_achievements(session)
        if notices:
            self.ctx.hub.send(identity, achievements_message(notices))

    def handle_request_hint(self, identity, message):
        text = lookup_hint(message.get('level'), message.get('question'), self.ctx.hints)
        self.ctx.hub.send(identity, hint_message(text))
