from .crowding import BOUNDARY_DISTANCE, crowding_distances, crowding_distances_by_rank
from .dominance import dominates, fitness_distance, is_dominated_by, squared_fitness_distance
from .protocol import AlgorithmState, BreedingStrategy
from .ranking import assign_pareto_ranks, fast_non_dominated_sort, pareto_ranks
from .survival import SurvivorDecision, select_survivors, truncate_by_fronts, truncate_population
from .termination import (
    EvaluationBudgetTermination,
    FitnessThresholdTermination,
    GenerationCountTermination,
    LambdaTermination,
    StopFlagTermination,
    TerminationCriterion,
    build_termination,
    check_criteria,
    should_stop,
    termination_pair,
)

__all__ = [
    "BOUNDARY_DISTANCE",
    "crowding_distances",
    "crowding_distances_by_rank",
    "dominates",
    "is_dominated_by",
    "fitness_distance",
    "squared_fitness_distance",
    "AlgorithmState",
    "BreedingStrategy",
    "assign_pareto_ranks",
    "fast_non_dominated_sort",
    "pareto_ranks",
    "SurvivorDecision",
    "select_survivors",
    "truncate_by_fronts",
    "truncate_population",
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
