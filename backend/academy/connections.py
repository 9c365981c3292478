"""Open-connection bookkeeping and fan-out.

ConnectionRegistry owns the identity of every open connection and the
session joined on it. BroadcastHub pushes messages to the connections the
registry reports as open.
"""

import json
import uuid
from typing import Callable, Dict, Iterator, List, Optional

from academy.models import SessionState
from academy.services.sessions import Session


class ConnectionRegistry:
    def __init__(self, id_factory: Callable[[], str] = None):
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)
        self._open: Dict[str, str] = {}          # identity -> transport sid
        self._by_sid: Dict[str, str] = {}        # transport sid -> identity
        self._sessions: Dict[str, Session] = {}  # identity -> joined session

    def admit(self, sid: str) -> str:
        identity = self._new_id()
        while identity in self._open:
            identity = self._new_id()
        self._open[identity] = sid
        self._by_sid[sid] = identity
        return identity

    def evict(self, identity: str) -> Optional[Session]:
        """Close the connection and destroy its session, if any."""
        sid = self._open.pop(identity, None)
        if sid is not None:
            self._by_sid.pop(sid, None)
        session = self._sessions.pop(identity, None)
        if session is not None:
            session.destroy()
        return session

    def active_count(self) -> int:
        return len(self._open)

    def identity_for(self, sid: str) -> Optional[str]:
        return self._by_sid.get(sid)

    def sid_for(self, identity: str) -> Optional[str]:
        return self._open.get(identity)

    def open_sids(self) -> List[str]:
        return list(self._open.values())

    def state_of(self, identity: str) -> SessionState:
        if identity not in self._open:
            return SessionState.DESTROYED
        if identity in self._sessions:
            return SessionState.ACTIVE
        return SessionState.UNJOINED

    def join(self, identity: str, player_name: str) -> Session:
        """Start (or restart) the session on an open connection."""
        if identity not in self._open:
            raise KeyError(identity)
        previous = self._sessions.get(identity)
        if previous is not None:
            previous.destroy()
        session = Session.join(identity, player_name)
        self._sessions[identity] = session
        return session

    def session_for(self, identity: str) -> Optional[Session]:
        return self._sessions.get(identity)

    def sessions(self) -> Iterator[Session]:
        return iter(list(self._sessions.values()))


class BroadcastHub:
    """Best-effort push of JSON messages over a Socket.IO-style emitter.

    ``emitter`` needs ``emit(event, data, to=..., namespace=...)``; the
    Flask-SocketIO instance satisfies it.
    """

    EVENT = 'message'

    def __init__(self, registry: ConnectionRegistry, emitter, namespace: str = '/ws'):
        self.registry = registry
        self.emitter = emitter
        self.namespace = namespace

    def broadcast(self, message: dict) -> int:
        """Deliver to every open connection; returns the number of recipients."""
        sids = self.registry.open_sids()
        if not sids:
            return 0
        payload = json.dumps(message)
        for sid in sids:
            self.emitter.emit(self.EVENT, payload, to=sid, namespace=self.namespace)
        return len(sids)

    def send(self, identity: str, message: dict) -> bool:
        """Deliver to one connection; skipped when it is no longer open."""
        sid = self.registry.sid_for(identity)
        if sid is None:
            return False
        self.emitter.emit(self.EVENT, json.dumps(message), to=sid, namespace=self.namespace)
        return True
