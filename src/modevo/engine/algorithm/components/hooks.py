"""
Generation-finished notification.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from modevo.engine.algorithm.base import EvolutionaryAlgorithm
    from modevo.foundation.observer import GenerationListener


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def notify_listeners(listeners: Iterable[GenerationListener], algorithm: EvolutionaryAlgorithm) -> None:
    """
    Call every listener, in registration order, with the algorithm.

    Listener exceptions propagate to the caller of ``optimize()``.
    """
    for listener in tuple(listeners):
        listener(algorithm)


def log_generation(algorithm: EvolutionaryAlgorithm) -> None:
    """Debug summary of the latest generation."""
    logger = _logger()
    if not logger.isEnabledFor(logging.DEBUG):
        return
    generation = algorithm.generations[-1]
    best = algorithm.get_best_individuals(generation)
    if algorithm.n_objectives == 1:
        summary = f"best={float(best[0].fitness[0]):.6g}"
    else:
        summary = f"front0={len(best)}"
    logger.debug(
        "generation %d: size=%d %s evals=%d",
        len(algorithm.generations) - 1,
        len(generation),
        summary,
        algorithm.n_evaluations,
    )


__all__ = ["notify_listeners", "log_generation"]
