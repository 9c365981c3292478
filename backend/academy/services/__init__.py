"""Game domain services: leaderboard, ranks, sessions, achievements, hints.

This package contains pure(ish) domain logic that is used by the HTTP
routes and socket handlers, keeping transport concerns separated from
core game mechanics.
"""
