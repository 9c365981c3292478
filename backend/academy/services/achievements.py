from typing import List

ELITE_THRESHOLD = 1000
HOT_STREAK_MIN = 5


def evaluate_achievements(session) -> List[str]:
    """Return the achievement notices earned by the session's latest answer.

    Elite Status fires when the score is at least 1000 and it rose by less
    than 1000 since the previous snapshot, so it fires on every answer once
    the player sits above the threshold. Hot Streak fires on every answer
    while the streak is 5 or more. The snapshot is refreshed afterwards.
    """
    notices = []
    if session.score >= ELITE_THRESHOLD and session.score - session.previous_score < ELITE_THRESHOLD:
        notices.append('🏆 Elite Status - 1000+ points!')
    if session.streak >= HOT_STREAK_MIN:
        notices.append(f'🔥 Hot Streak - {session.streak} correct answers!')
    session.previous_score = session.score
    return notices
