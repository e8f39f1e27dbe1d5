from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from modevo.foundation.individual import Individual


@runtime_checkable
class ProblemProtocol(Protocol):
    """What the engine needs from a fitness oracle."""

    n_var: int

    def calculate_fitness_values(self, individual: Individual) -> Sequence[float]: ...

    def create_random_individual(self) -> Individual: ...

    def is_feasible(self, individual: Individual) -> bool: ...


__all__ = ["ProblemProtocol"]
