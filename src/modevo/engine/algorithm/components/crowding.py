"""
Crowding distance: a per-front diversity estimate (higher = more isolated).
"""

from __future__ import annotations

import math
from typing import Sequence

from modevo.foundation.individual import ParetoEvaluatedIndividual

BOUNDARY_DISTANCE = math.inf


def crowding_distances(individuals: Sequence[ParetoEvaluatedIndividual]) -> dict[int, float]:
    """
    Crowding distance of each member of ``individuals`` keyed by its position.

    Sets with at most two members are all boundary points. Otherwise, per
    objective, the minimum and maximum members are pinned to
    ``BOUNDARY_DISTANCE`` and interior members accumulate the normalised gap
    between their neighbours. Objectives with zero range contribute nothing.
    """
    n = len(individuals)
    if n <= 2:
        return {i: BOUNDARY_DISTANCE for i in range(n)}

    rows = [ind.fitness.tolist() for ind in individuals]
    distances = {i: 0.0 for i in range(n)}

    for m in range(len(rows[0])):
        order = sorted(range(n), key=lambda i: rows[i][m])
        lo, hi = rows[order[0]][m], rows[order[-1]][m]
        span = hi - lo

        distances[order[0]] = BOUNDARY_DISTANCE
        distances[order[-1]] = BOUNDARY_DISTANCE
        if span == 0:
            continue

        for k in range(1, n - 1):
            idx = order[k]
            if distances[idx] == BOUNDARY_DISTANCE:
                continue
            distances[idx] += (rows[order[k + 1]][m] - rows[order[k - 1]][m]) / span

    return distances


def crowding_distances_by_rank(individuals: Sequence[ParetoEvaluatedIndividual]) -> dict[int, float]:
    """Crowding distance computed independently inside each rank group, keyed by position."""
    groups: dict[int, list[int]] = {}
    for pos, ind in enumerate(individuals):
        groups.setdefault(ind.rank, []).append(pos)

    distances: dict[int, float] = {}
    for positions in groups.values():
        local = crowding_distances([individuals[p] for p in positions])
        for local_pos, value in local.items():
            distances[positions[local_pos]] = value
    return distances


__all__ = ["BOUNDARY_DISTANCE", "crowding_distances", "crowding_distances_by_rank"]
