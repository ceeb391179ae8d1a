"""Combination Routes: read-only views over the combination engine.

Invariants:
    - Each handler calls exactly one engine operation and always returns 200
    - No cross-request state: /all is identical on every call

Design Decisions:
    - Handlers are plain `def`: engine calls are CPU-only and tiny, FastAPI
      runs them in its threadpool
"""

import logging

from fastapi import APIRouter, Depends

from coins_api.api.app_state import AppState, get_app_state
from coins_api.core.combination_engine import enumerate_all, random_combination
from coins_api.schemas.combination import (
    AllCombinationsResponse, RandomCombinationResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["combinations"])


@router.get("/random", response_model=RandomCombinationResponse)
def get_random_combination(state: AppState = Depends(get_app_state)):
    """One uniformly drawn combination and its value in cents."""
    combination = random_combination(state.rng)
    logger.debug(
        "Random combination drawn",
        extra={"mask": combination.index, "path": "/random"},
    )
    return RandomCombinationResponse.from_combination(combination)


@router.get("/all", response_model=AllCombinationsResponse)
def get_all_combinations():
    """All 16 combinations, indexed by generating mask."""
    return AllCombinationsResponse.from_combinations(enumerate_all())
