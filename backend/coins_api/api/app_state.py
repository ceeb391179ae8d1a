"""Application State: explicit, read-only context shared by all handlers.

Invariants:
    - Built once by create_app(); handlers read it, never mutate it
    - Holds no per-request data: every request is independent

Design Decisions:
    - Passed via a FastAPI dependency, not imported as a global, so tests can
      swap it with app.dependency_overrides
    - The random source is the only live object; random.Random serializes
      its own state under concurrent callers
"""

import random
from dataclasses import dataclass

from fastapi import Request

from coins_api import __version__
from coins_api.config import Settings
from coins_api.core.combination_engine import RandomSource


@dataclass(frozen=True)
class AppState:
    """Per-process configuration context for route handlers."""
    version: str
    rng: RandomSource


def build_app_state(settings: Settings) -> AppState:
    rng = random.Random(settings.random_seed) if settings.random_seed is not None else random
    return AppState(version=__version__, rng=rng)


def get_app_state(request: Request) -> AppState:
    """FastAPI dependency: the AppState stored by create_app()."""
    return request.app.state.coins
