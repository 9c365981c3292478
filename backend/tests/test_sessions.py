import pytest

from academy.models import SessionState
from academy.services.achievements import evaluate_achievements
from academy.services.hints import FALLBACK_HINT, HINTS, lookup_hint
from academy.services.sessions import Session, SessionClosedError


def test_three_correct_answers_earn_bonus_hint():
    session = Session.join('s1', 'alice')
    feedback = [session.submit_answer(True, 10) for _ in range(3)]
    assert (session.score, session.streak) == (30, 3)
    assert [f.bonus_points for f in feedback] == [0, 0, 50]
    # Bonus is informational only
    assert feedback[-1].new_score == 30


def test_incorrect_answer_resets_streak_and_keeps_score():
    session = Session.join('s1', 'alice')
    session.submit_answer(True, 10)
    session.submit_answer(True, 10)
    feedback = session.submit_answer(False, 999)
    assert feedback.to_dict() == {'correct': False, 'newScore': 20, 'streak': 0, 'bonusPoints': 0}
    assert session.submit_answer(True, 5).streak == 1


def test_destroyed_session_rejects_answers():
    session = Session.join('s1', 'alice')
    session.destroy()
    assert session.state is SessionState.DESTROYED
    with pytest.raises(SessionClosedError):
        session.submit_answer(True, 10)


def test_join_starts_zeroed():
    session = Session.join('s1', 'alice')
    assert (session.score, session.streak, session.previous_score) == (0, 0, 0)
    assert session.is_active


def test_hot_streak_fires_on_every_answer_from_five():
    session = Session.join('s1', 'alice')
    fired = []
    for _ in range(7):
        session.submit_answer(True, 1)
        fired.append(evaluate_achievements(session))
    assert fired[:4] == [[], [], [], []]
    assert fired[4] == ['🔥 Hot Streak - 5 correct answers!']
    assert fired[6] == ['🔥 Hot Streak - 7 correct answers!']


def test_elite_status_on_crossing_threshold():
    session = Session.join('s1', 'alice')
    session.submit_answer(True, 990)
    assert evaluate_achievements(session) == []
    session.submit_answer(True, 20)
    assert evaluate_achievements(session) == ['🏆 Elite Status - 1000+ points!']
    assert session.previous_score == 1010


def test_elite_status_skips_single_jump_of_a_thousand():
    session = Session.join('s1', 'alice')
    session.submit_answer(True, 1200)
    assert evaluate_achievements(session) == []
    # Snapshot caught up, so later answers above the threshold fire again
    session.submit_answer(False)
    assert evaluate_achievements(session) == ['🏆 Elite Status - 1000+ points!']


def test_hint_lookup():
    assert lookup_hint(2, 0) == 'What do most users choose for passwords?'
    assert lookup_hint('1', '2') == HINTS[(1, 2)]
    assert lookup_hint(9, 9) == FALLBACK_HINT
    assert lookup_hint(None, None) == FALLBACK_HINT
    assert lookup_hint('one', 0) == FALLBACK_HINT


def test_hint_lookup_needs_integral_keys():
    assert lookup_hint(1.5, 0) == FALLBACK_HINT
    assert lookup_hint(1, 0.5) == FALLBACK_HINT
    assert lookup_hint('1.0', 0) == FALLBACK_HINT
    assert lookup_hint(float('nan'), 0) == FALLBACK_HINT
    assert lookup_hint(True, 0) == FALLBACK_HINT
    assert lookup_hint(2.0, 1) == HINTS[(2, 1)]
    assert lookup_hint(' 2 ', '1') == HINTS[(2, 1)]
