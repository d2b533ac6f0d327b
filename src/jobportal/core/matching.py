"""Simulated matching between profiles and jobs."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass
class MatchConfig:
    """Configuration for simulated matching."""

    limit: int = 3
    seed: int | None = None


class RandomMatcher:
    """Stand-in for an external match service.

    Picks up to ``limit`` records uniformly at random; no relevance is implied.
    The input sequence is never reordered.
    """

    method = "random_sample"

    def __init__(self, *, config: MatchConfig | None = None) -> None:
        self._config = config or MatchConfig()
        self._rng = random.Random(self._config.seed)

    def select(self, candidates: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
        pool = list(candidates)
        return self._rng.sample(pool, min(self._config.limit, len(pool)))
