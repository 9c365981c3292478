import logging

from academy.services.status import log_status, start_status_logger


def test_status_logger_is_disabled_in_testing(flask_app):
    assert start_status_logger(flask_app) is None


def test_status_line_reports_counts(flask_app, client, sio_client, caplog):
    client.post('/api/score', json={'playerName': 'alice', 'score': 120})
    with caplog.at_level(logging.INFO):
        log_status(flask_app)
    assert '[status] 1 players on leaderboard, 1 active connections' in caplog.text
