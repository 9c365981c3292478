from flask import current_app, request

from academy import socketio
from academy.context import get_context
from academy.protocol import GameProtocolDispatcher, connected_message

NAMESPACE = '/ws'


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    ctx = get_context()
    with ctx.lock:
        identity = ctx.registry.admit(_get_sid())
        current_app.logger.info(f"[connect] session={identity} active={ctx.registry.active_count()}")
        ctx.hub.send(identity, connected_message(identity, ctx.top_entries(), ctx.stats()))
        ctx.broadcast_user_count()


def handle_disconnect(*args):
    ctx = get_context()
    with ctx.lock:
        identity = ctx.registry.identity_for(_get_sid())
        if identity is None:
            return
        ctx.registry.evict(identity)
        current_app.logger.info(f"[disconnect] session={identity} active={ctx.registry.active_count()}")
        ctx.broadcast_user_count()


def handle_message(data):
    ctx = get_context()
    with ctx.lock:
        identity = ctx.registry.identity_for(_get_sid())
        if identity is None:
            current_app.logger.warning(f"[protocol] message from unregistered sid {_get_sid()}")
            return
        GameProtocolDispatcher(ctx, current_app.logger).dispatch(identity, data)


def handle_error(exc):
    # Connection stays open; the failing message is dropped
    current_app.logger.error(f"[protocol] handler failed: {exc}", exc_info=exc)


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('message', handle_message, namespace=NAMESPACE)
    socketio.on_error_default(handle_error)
