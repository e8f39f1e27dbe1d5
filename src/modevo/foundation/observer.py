from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from modevo.engine.algorithm.base import EvolutionaryAlgorithm


@runtime_checkable
class GenerationListener(Protocol):
    """
    Callback invoked synchronously once per completed generation.

    The only payload is the algorithm itself; listeners read
    ``algorithm.generations[-1]`` to inspect the state that just advanced.
    Exceptions raised by a listener are not caught by the engine.
    """

    def __call__(self, algorithm: EvolutionaryAlgorithm) -> None: ...


__all__ = ["GenerationListener"]
