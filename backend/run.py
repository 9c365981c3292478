import signal

import click

from academy import configure_logging, create_app, ensure_static_dir, socketio
from academy.context import get_context
from academy.services.status import start_status_logger
from config import Config


def make_shutdown_handler(app):
    """Signal handler that lets the running handler finish, then exits.

    Handlers run while holding the context lock, so taking it here waits for
    the one in flight. SystemExit then unwinds the serve loop in the main
    thread, which stops accepting connections.
    """
    def _shutdown(signum, frame):
        app.logger.info(f"[shutdown] received {signal.Signals(signum).name}, shutting down Shadow Hacker Academy...")
        with get_context(app).lock:
            raise SystemExit(0)

    return _shutdown


def _install_shutdown_handlers(app):
    shutdown = make_shutdown_handler(app)
    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)


@click.command()
@click.option('--host', default=Config.HOST, show_default=True, help='Interface to listen on.')
@click.option('--port', default=Config.PORT, show_default=True, type=int, help='Port to listen on.')
@click.option('--debug', is_flag=True, help='Enable Flask debug mode.')
def main(host, port, debug):
    """Run the Shadow Hacker Academy game server."""
    configure_logging(Config.LOG_LEVEL)
    app = create_app()
    ensure_static_dir(app)
    _install_shutdown_handlers(app)
    start_status_logger(app)

    app.logger.info(f"[startup] Shadow Hacker Academy server running on port {port}")
    app.logger.info(f"[startup] access the game at: http://localhost:{port}")
    app.logger.info(f"[startup] stats endpoint: http://localhost:{port}/api/stats")
    try:
        # Use SocketIO server to enable websockets
        socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=True)
    finally:
        app.logger.info('[shutdown] server closed')


if __name__ == '__main__':
    main()
