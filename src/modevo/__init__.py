"""
modevo: multi-objective differential evolution.

Quick start::

    import numpy as np
    from modevo import DEConfig, SphereProblem, build_differential_evolution

    rng = np.random.default_rng(0)
    algorithm = build_differential_evolution(SphereProblem(2, rng), DEConfig.default(), rng)
    algorithm.optimize()
    best = algorithm.get_best_individuals()[0]
"""

from .engine.algorithm import (
    DEConfig,
    DEConfigData,
    DifferentialEvolution,
    EvolutionaryAlgorithm,
    build_differential_evolution,
)
from .engine.algorithm.components import (
    AlgorithmState,
    BreedingStrategy,
    EvaluationBudgetTermination,
    FitnessThresholdTermination,
    GenerationCountTermination,
    LambdaTermination,
    StopFlagTermination,
    TerminationCriterion,
    assign_pareto_ranks,
    crowding_distances,
    dominates,
    fast_non_dominated_sort,
    truncate_population,
)
from .engine.config import load_config, load_de_config
from .foundation.eval import SerialEvalBackend, ThreadPoolEvalBackend, resolve_eval_backend
from .foundation.exceptions import (
    ConfigurationError,
    EvaluationError,
    InvalidParameterError,
    ModevoError,
    OptimizationError,
    ProblemDimensionError,
    UnknownProblemError,
)
from .foundation.individual import (
    EvaluatedIndividual,
    EvaluatedOffspring,
    Generation,
    Individual,
    Offspring,
    ParetoEvaluatedIndividual,
)
from .foundation.logging import configure_modevo_logging
from .foundation.observer import GenerationListener
from .foundation.problem import (
    BoothProblem,
    DTLZ2Problem,
    OptimizationProblem,
    RosenbrockProblem,
    SchafferProblem,
    SphereProblem,
    ZDT1Problem,
    ZDT2Problem,
    available_problem_names,
    make_problem,
)

__version__ = "0.1.0"

__all__ = [
    "DEConfig",
    "DEConfigData",
    "DifferentialEvolution",
    "EvolutionaryAlgorithm",
    "build_differential_evolution",
    "AlgorithmState",
    "BreedingStrategy",
    "TerminationCriterion",
    "GenerationCountTermination",
    "EvaluationBudgetTermination",
    "FitnessThresholdTermination",
    "LambdaTermination",
    "StopFlagTermination",
    "assign_pareto_ranks",
    "crowding_distances",
    "dominates",
    "fast_non_dominated_sort",
    "truncate_population",
    "load_config",
    "load_de_config",
    "SerialEvalBackend",
    "ThreadPoolEvalBackend",
    "resolve_eval_backend",
    "ModevoError",
    "ConfigurationError",
    "InvalidParameterError",
    "ProblemDimensionError",
    "UnknownProblemError",
    "OptimizationError",
    "EvaluationError",
    "Individual",
    "EvaluatedIndividual",
    "ParetoEvaluatedIndividual",
    "Offspring",
    "EvaluatedOffspring",
    "Generation",
    "GenerationListener",
    "configure_modevo_logging",
    "OptimizationProblem",
    "SphereProblem",
    "BoothProblem",
    "RosenbrockProblem",
    "SchafferProblem",
    "ZDT1Problem",
    "ZDT2Problem",
    "DTLZ2Problem",
    "available_problem_names",
    "make_problem",
]
