from flask import Blueprint, current_app, jsonify, request

from academy.context import get_context
from academy.services.leaderboard import InvalidScoreError

api = Blueprint('api', __name__)


@api.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    """Top entries of the global leaderboard."""
    ctx = get_context()
    with ctx.lock:
        return jsonify(ctx.top_entries())


@api.route('/score', methods=['POST'])
def submit_score():
    """
    Records a final score, answers with the rank label for it and pushes
    the new top entries to every connected client.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Invalid data'}), 400
    player_name = data.get('playerName')
    score = data.get('score')
    level = data.get('level') or 1

    ctx = get_context()
    with ctx.lock:
        try:
            rank = ctx.leaderboard.upsert(player_name, score, level)
        except InvalidScoreError as exc:
            current_app.logger.info(f"[score] rejected submission: {exc}")
            return jsonify({'error': 'Invalid data'}), 400
        current_app.logger.info(f"[score] player={player_name!r} score={score} level={level} rank={rank!r}")
        ctx.broadcast_leaderboard()

    return jsonify({'success': True, 'rank': rank})


@api.route('/stats', methods=['GET'])
def get_stats():
    ctx = get_context()
    with ctx.lock:
        return jsonify(ctx.stats())
