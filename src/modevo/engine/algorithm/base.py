"""
Generational loop shared by all breeding strategies.

One iteration: select parents -> breed -> evaluate -> survivor selection per
offspring -> fast non-dominated sort -> truncation -> publish the new
generation -> notify listeners -> consult termination.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from modevo.foundation.eval import EvaluationBackend, SerialEvalBackend
from modevo.foundation.exceptions import OptimizationError, ProblemDimensionError
from modevo.foundation.individual import EvaluatedIndividual, Generation, Individual, ParetoEvaluatedIndividual
from modevo.foundation.observer import GenerationListener
from modevo.foundation.problem.types import ProblemProtocol

from .components.hooks import log_generation, notify_listeners
from .components.protocol import AlgorithmState, BreedingStrategy
from .components.ranking import assign_pareto_ranks
from .components.survival import select_survivors, truncate_population


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class EvolutionaryAlgorithm:
    """
    Stateful driver of an evolutionary run.

    The driver owns the append-only sequence of generations; each append
    replaces the ``generations`` tuple as a whole, so readers on other threads
    always see complete snapshots.
    """

    def __init__(
        self,
        problem: ProblemProtocol,
        strategy: BreedingStrategy,
        *,
        eval_backend: EvaluationBackend | None = None,
        listeners: Iterable[GenerationListener] = (),
    ) -> None:
        self.problem = problem
        self.strategy = strategy
        self.eval_backend = eval_backend if eval_backend is not None else SerialEvalBackend()
        self._listeners: list[GenerationListener] = list(listeners)
        self._generations: tuple[Generation, ...] = ()
        self._state = AlgorithmState.UNINITIALIZED
        self._n_obj: int | None = None
        self._n_evaluations = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def state(self) -> AlgorithmState:
        return self._state

    @property
    def generations(self) -> tuple[Generation, ...]:
        return self._generations

    @property
    def n_objectives(self) -> int | None:
        """Objective count, fixed by the first evaluation (None before it)."""
        return self._n_obj

    @property
    def n_evaluations(self) -> int:
        return self._n_evaluations

    @property
    def population_size(self) -> int:
        return self.strategy.population_size

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: GenerationListener) -> GenerationListener:
        """Register a generation-finished callback; returns it so it can decorate a function."""
        self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: GenerationListener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Services for breeding strategies
    # ------------------------------------------------------------------

    def evaluate(self, individuals: Sequence[Individual]) -> list[np.ndarray]:
        """Evaluate through the backend, enforcing a constant objective count."""
        fitness = self.eval_backend.evaluate(individuals, self.problem)
        for values in fitness:
            n_obj = int(np.shape(values)[0]) if np.ndim(values) == 1 else -1
            if self._n_obj is None and n_obj > 0:
                self._n_obj = n_obj
            if n_obj != self._n_obj:
                raise ProblemDimensionError(
                    f"Fitness vector of shape {np.shape(values)} does not match the run's {self._n_obj} objectives.",
                    n_obj=self._n_obj,
                )
        self._n_evaluations += len(individuals)
        return fitness

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> Generation:
        """Build and publish generation 0."""
        if self._state is not AlgorithmState.UNINITIALIZED:
            raise OptimizationError(f"Cannot initialize an algorithm in state '{self._state}'.")
        _logger().info(
            "Starting %s on %r (pop_size=%d)",
            type(self.strategy).__name__,
            self.problem,
            self.population_size,
        )
        first = self.strategy.initialize_first_generation(self)
        self._publish(first)
        self._state = AlgorithmState.RUNNING
        return first

    def step(self) -> Generation:
        """
        Advance by exactly one generation (building generation 0 if needed).

        Termination criteria are not consulted here; see :meth:`optimize`.
        """
        if self._state is AlgorithmState.TERMINATED:
            raise OptimizationError("Cannot step a terminated algorithm.")
        if self._state is AlgorithmState.UNINITIALIZED:
            return self.initialize()

        parents = list(self.strategy.select_parents(self))
        offspring = self.strategy.create_offspring(parents)
        fitness = self.evaluate(offspring)

        pool: list[EvaluatedIndividual] = []
        for child, values in zip(offspring, fitness):
            decision = select_survivors(child.with_fitness(values), parents, self.problem)
            pool.extend(decision.members())

        ranked = assign_pareto_ranks(pool)
        generation = Generation(tuple(truncate_population(ranked, self.population_size)))
        self._publish(generation)
        log_generation(self)
        notify_listeners(self._listeners, self)
        return generation

    def optimize(self) -> Generation:
        """Run from initialization until every termination criterion agrees to stop."""
        self.initialize()
        while self.strategy.should_continue(self):
            self.step()
        self._state = AlgorithmState.TERMINATED
        _logger().info(
            "Terminated after %d generations (%d evaluations)",
            len(self._generations),
            self._n_evaluations,
        )
        return self._generations[-1]

    def _publish(self, generation: Generation) -> None:
        self._generations = self._generations + (generation,)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def get_best_individuals(self, generation: Generation | None = None) -> tuple[ParetoEvaluatedIndividual, ...]:
        """
        Single objective: the one individual with minimal fitness.
        Multiple objectives: every member of the lowest-ranked front.
        """
        if generation is None:
            if not self._generations:
                raise OptimizationError("No generation available yet; call optimize() or step() first.")
            generation = self._generations[-1]
        if len(generation) == 0:
            return ()
        if generation[0].n_obj == 1:
            return (min(generation, key=lambda ind: float(ind.fitness[0])),)
        best_rank = min(ind.rank for ind in generation)
        return generation.front(best_rank)


__all__ = ["EvolutionaryAlgorithm"]
