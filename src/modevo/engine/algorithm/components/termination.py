"""
Termination criteria consulted by the generational loop after every generation.

The loop stops only when *every* configured criterion agrees to stop; as long as
one criterion still says "not yet", the run continues. Adding a criterion can
therefore only prolong a run. An empty criteria list stops right after the
first generation.

Criteria built from configuration carry a ``(kind, value)`` form
(:meth:`to_pair`) that :func:`build_termination` accepts back.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from modevo.foundation.exceptions import ConfigurationError, InvalidParameterError

if TYPE_CHECKING:
    from modevo.engine.algorithm.base import EvolutionaryAlgorithm
    from modevo.foundation.problem.types import ProblemProtocol


@runtime_checkable
class TerminationCriterion(Protocol):
    def should_terminate(self, algorithm: EvolutionaryAlgorithm) -> bool: ...


class _ValueCriterion:
    """Criterion fully described by ``(kind, value)``; compares and hashes by that pair."""

    kind = ""

    @property
    def value(self) -> Any:
        raise NotImplementedError

    def to_pair(self) -> tuple[str, Any]:
        return (self.kind, self.value)

    def check_problem(self, problem: ProblemProtocol) -> None:
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ValueCriterion):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class GenerationCountTermination(_ValueCriterion):
    """Stop once ``len(algorithm.generations) >= n_generations`` (generation 0 included)."""

    kind = "max_generations"

    def __init__(self, n_generations: int) -> None:
        if n_generations < 1:
            raise InvalidParameterError("n_generations", n_generations, ">= 1")
        self.n_generations = int(n_generations)

    @property
    def value(self) -> int:
        return self.n_generations

    def should_terminate(self, algorithm: EvolutionaryAlgorithm) -> bool:
        return len(algorithm.generations) >= self.n_generations


class EvaluationBudgetTermination(_ValueCriterion):
    """Stop once at least ``max_evaluations`` fitness evaluations have been spent."""

    kind = "max_evaluations"

    def __init__(self, max_evaluations: int) -> None:
        if max_evaluations < 1:
            raise InvalidParameterError("max_evaluations", max_evaluations, ">= 1")
        self.max_evaluations = int(max_evaluations)

    @property
    def value(self) -> int:
        return self.max_evaluations

    def should_terminate(self, algorithm: EvolutionaryAlgorithm) -> bool:
        return algorithm.n_evaluations >= self.max_evaluations


class FitnessThresholdTermination(_ValueCriterion):
    """
    Single-objective: stop once the best fitness in the latest generation is <= ``target``.

    Problems that declare ``n_obj`` are checked by :meth:`check_problem` before
    anything is evaluated; for the others the objective count is only known
    after generation 0, so the mismatch surfaces at the first check.
    """

    kind = "fitness_threshold"

    def __init__(self, target: float) -> None:
        self.target = float(target)

    @property
    def value(self) -> float:
        return self.target

    def check_problem(self, problem: ProblemProtocol) -> None:
        n_obj = getattr(problem, "n_obj", None)
        if n_obj is not None and n_obj != 1:
            raise ConfigurationError(
                f"FitnessThresholdTermination only applies to single-objective problems, got n_obj={n_obj}.",
                suggestion="Use max_generations or max_evaluations for multi-objective runs.",
                details={"n_obj": n_obj},
            )

    def should_terminate(self, algorithm: EvolutionaryAlgorithm) -> bool:
        if algorithm.n_objectives != 1:
            raise ConfigurationError(
                "FitnessThresholdTermination only applies to single-objective problems.",
                details={"n_obj": algorithm.n_objectives},
            )
        best = algorithm.get_best_individuals()[0]
        return float(best.fitness[0]) <= self.target


class LambdaTermination:
    """Wrap any ``callable(algorithm) -> bool``. Has no configuration form."""

    def __init__(self, predicate: Callable[[EvolutionaryAlgorithm], bool]) -> None:
        self.predicate = predicate

    def should_terminate(self, algorithm: EvolutionaryAlgorithm) -> bool:
        return bool(self.predicate(algorithm))

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__qualname__", type(self.predicate).__name__)
        return f"LambdaTermination({name})"


class StopFlagTermination:
    """
    Cooperative abort: agrees to stop once ``event`` is set.

    The flag is only looked at between generations. Combined with other
    criteria it still needs their agreement, so use it alone (or with
    criteria that are already satisfied) for an immediate stop.
    """

    kind = "stop_flag"

    def __init__(self, event: threading.Event | None = None) -> None:
        self.event = event if event is not None else threading.Event()

    def request_stop(self) -> None:
        self.event.set()

    def to_pair(self) -> tuple[str, Any]:
        # Rebuilding from config yields a fresh, unset flag.
        return (self.kind, None)

    def should_terminate(self, algorithm: EvolutionaryAlgorithm) -> bool:
        return self.event.is_set()

    def __repr__(self) -> str:
        return f"StopFlagTermination(set={self.event.is_set()})"


def should_stop(criteria: Iterable[TerminationCriterion], algorithm: EvolutionaryAlgorithm) -> bool:
    """True when every criterion agrees to stop (vacuously true for no criteria)."""
    return all(criterion.should_terminate(algorithm) for criterion in criteria)


def check_criteria(criteria: Iterable[TerminationCriterion], problem: ProblemProtocol) -> None:
    """Reject criteria that cannot apply to ``problem`` before the run starts."""
    for criterion in criteria:
        check = getattr(criterion, "check_problem", None)
        if check is not None:
            check(problem)


def termination_pair(criterion: TerminationCriterion) -> list[Any]:
    """``[kind, value]`` form of ``criterion``, as accepted by :func:`build_termination`."""
    to_pair = getattr(criterion, "to_pair", None)
    if to_pair is None:
        raise ConfigurationError(
            f"{criterion!r} has no configuration form.",
            suggestion="Only max_generations, max_evaluations, fitness_threshold and stop_flag criteria serialize.",
        )
    kind, value = to_pair()
    return [kind, value]


def build_termination(kind: str, value: Any) -> TerminationCriterion:
    """Build a criterion from a ``(kind, value)`` pair such as ``("max_generations", 100)``."""
    key = kind.strip().lower()
    if key in {"max_generations", "n_gen", "generations"}:
        return GenerationCountTermination(int(value))
    if key in {"max_evaluations", "n_eval", "evaluations"}:
        return EvaluationBudgetTermination(int(value))
    if key in {"fitness_threshold", "target"}:
        return FitnessThresholdTermination(float(value))
    if key == "stop_flag":
        return StopFlagTermination()
    raise ConfigurationError(
        f"Unknown termination criterion '{kind}'.",
        suggestion="Use one of: max_generations, max_evaluations, fitness_threshold, stop_flag",
    )


__all__ = [
    "TerminationCriterion",
    "GenerationCountTermination",
    "EvaluationBudgetTermination",
    "FitnessThresholdTermination",
    "LambdaTermination",
    "StopFlagTermination",
    "should_stop",
    "check_criteria",
    "termination_pair",
    "build_termination",
]
