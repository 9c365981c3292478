import threading
from dataclasses import dataclass, field

from academy.connections import BroadcastHub, ConnectionRegistry
from academy.services.hints import HINTS
from academy.services.leaderboard import LeaderboardStore

EXTENSION_KEY = 'academy'


@dataclass
class GameContext:
    """Everything the handlers share, built once per app by create_app.

    Every REST and socket handler runs while holding ``lock`` so handlers
    run to completion one at a time.
    """
    leaderboard: LeaderboardStore
    registry: ConnectionRegistry
    hub: BroadcastHub
    hints: dict = field(default_factory=lambda: dict(HINTS))
    top_n: int = 10
    lock: threading.RLock = field(default_factory=threading.RLock)

    @classmethod
    def create(cls, emitter, namespace='/ws', max_entries=100, top_n=10):
        registry = ConnectionRegistry()
        return cls(
            leaderboard=LeaderboardStore(max_entries=max_entries),
            registry=registry,
            hub=BroadcastHub(registry, emitter, namespace=namespace),
            top_n=top_n,
        )

    def top_entries(self):
        return self.leaderboard.top_dicts(self.top_n)

    def stats(self):
        board = self.leaderboard.stats()
        return {
            'activeUsers': self.registry.active_count(),
            'totalPlayers': board['count'],
            'highScore': board['highScore'],
            'averageScore': board['averageScore'],
        }

    def broadcast_leaderboard(self) -> int:
        return self.hub.broadcast({'type': 'leaderboardUpdate', 'leaderboard': self.top_entries()})

    def broadcast_user_count(self) -> int:
        return self.hub.broadcast({'type': 'userCountUpdate', 'activeUsers': self.registry.active_count()})


def get_context(app=None) -> GameContext:
    if app is None:
        from flask import current_app
        app = current_app
    return app.extensions[EXTENSION_KEY]
