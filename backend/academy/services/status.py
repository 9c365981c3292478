from academy import socketio
from academy.context import get_context


def log_status(app) -> None:
    ctx = get_context(app)
    with ctx.lock:
        players = len(ctx.leaderboard)
        active = ctx.registry.active_count()
    app.logger.info(f"[status] {players} players on leaderboard, {active} active connections")


def start_status_logger(app):
    """Log leaderboard and connection counts every STATUS_LOG_INTERVAL_SEC.

    - No-ops in TESTING mode or when the interval is 0
    - Runs as a Socket.IO background task for the life of the process
    """
    interval = int(app.config.get('STATUS_LOG_INTERVAL_SEC', 0))
    if app.config.get('TESTING') or interval <= 0:
        return None

    def _worker():
        while True:
            socketio.sleep(interval)
            log_status(app)

    return socketio.start_background_task(_worker)
