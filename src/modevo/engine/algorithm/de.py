"""
Differential evolution (DE/rand/1/bin) breeding strategy.

https://en.wikipedia.org/wiki/Differential_evolution
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from modevo.foundation.eval import EvaluationBackend
from modevo.foundation.exceptions import ConfigurationError
from modevo.foundation.individual import Generation, Individual, Offspring, ParetoEvaluatedIndividual
from modevo.foundation.observer import GenerationListener
from modevo.foundation.problem.types import ProblemProtocol

from .base import EvolutionaryAlgorithm
from .components.ranking import assign_pareto_ranks
from .components.termination import check_criteria, should_stop
from .config import MIN_POP_SIZE, DEConfigData


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class DifferentialEvolution:
    """
    Classic DE breeding: every member of the current generation is a parent.

    For each parent ``x`` three distinct other parents ``a, b, c`` are drawn
    without replacement. Each gene of the trial vector is
    ``a[i] + F * (b[i] - c[i])`` when a uniform draw is below ``CR`` or ``i``
    is the forced index ``R``, and ``x[i]`` otherwise. The forced index makes
    every trial differ from its parent in at least one gene, even with CR=0.
    The exception is a degenerate pool where ``b[R] == c[R]`` and
    ``a[R] == x[R]``, e.g. a population of identical individuals: the trial
    then equals its parent, and such a population cannot move.

    The random generator is owned by the caller; sharing one seeded generator
    with the problem reproduces a run exactly.
    """

    def __init__(
        self,
        config: DEConfigData,
        rng: np.random.Generator,
        seed_individuals: Iterable[Individual] = (),
    ) -> None:
        self.config = config
        self.rng = rng
        self.seed_individuals: tuple[Individual, ...] = tuple(seed_individuals)

    @property
    def population_size(self) -> int:
        return self.config.pop_size

    @property
    def cr(self) -> float:
        return self.config.cr

    @property
    def f(self) -> float:
        return self.config.f

    def _initial_individuals(self, problem: ProblemProtocol) -> list[Individual]:
        seeds: list[Individual] = []
        seen: set[int] = set()
        for ind in self.seed_individuals:
            if id(ind) not in seen:
                seen.add(id(ind))
                seeds.append(ind)
        if len(seeds) > self.population_size:
            _logger().warning(
                "Dropping %d of %d seed individuals to fit pop_size=%d",
                len(seeds) - self.population_size,
                len(seeds),
                self.population_size,
            )
            seeds = seeds[: self.population_size]
        sampled = [problem.create_random_individual() for _ in range(self.population_size - len(seeds))]
        return seeds + sampled

    def initialize_first_generation(self, algorithm: EvolutionaryAlgorithm) -> Generation:
        check_criteria(self.config.termination, algorithm.problem)
        individuals = self._initial_individuals(algorithm.problem)
        # Generation 0 is taken as sampled; feasibility only gates offspring.
        infeasible = sum(1 for ind in individuals if not algorithm.problem.is_feasible(ind))
        if infeasible:
            _logger().warning("%d of %d initial individuals are infeasible", infeasible, len(individuals))
        fitness = algorithm.evaluate(individuals)
        evaluated = [ind.with_fitness(values) for ind, values in zip(individuals, fitness)]
        return Generation(tuple(assign_pareto_ranks(evaluated)))

    def select_parents(self, algorithm: EvolutionaryAlgorithm) -> Sequence[ParetoEvaluatedIndividual]:
        return algorithm.generations[-1].population

    def create_offspring(self, parents: Sequence[ParetoEvaluatedIndividual]) -> list[Offspring]:
        n = len(parents)
        if n < MIN_POP_SIZE:
            raise ConfigurationError(
                f"Differential evolution needs at least {MIN_POP_SIZE} parents, got {n}.",
                suggestion="Increase pop_size.",
            )
        X = np.vstack([p.genes for p in parents])
        n_var = X.shape[1]
        cr, f = self.config.cr, self.config.f

        offspring: list[Offspring] = []
        for i in range(n):
            picks = self.rng.choice(n - 1, size=3, replace=False)
            picks = picks + (picks >= i)  # skip the parent itself
            a, b, c = X[picks]
            forced = self.rng.integers(n_var)
            mask = self.rng.random(n_var) < cr
            mask[forced] = True
            trial = np.where(mask, a + f * (b - c), X[i])
            offspring.append(Offspring(trial, (i,)))
        return offspring

    def should_continue(self, algorithm: EvolutionaryAlgorithm) -> bool:
        return not should_stop(self.config.termination, algorithm)

    def __repr__(self) -> str:
        return f"DifferentialEvolution(pop_size={self.population_size}, cr={self.cr}, f={self.f})"


def build_differential_evolution(
    problem: ProblemProtocol,
    config: DEConfigData,
    rng: np.random.Generator,
    *,
    seed_individuals: Iterable[Individual] = (),
    eval_backend: EvaluationBackend | None = None,
    listeners: Iterable[GenerationListener] = (),
) -> EvolutionaryAlgorithm:
    """Wire a :class:`DifferentialEvolution` strategy into a ready-to-run driver."""
    check_criteria(config.termination, problem)
    strategy = DifferentialEvolution(config, rng, seed_individuals)
    return EvolutionaryAlgorithm(problem, strategy, eval_backend=eval_backend, listeners=listeners)


__all__ = ["DifferentialEvolution", "build_differential_evolution"]
