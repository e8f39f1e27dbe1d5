from .base import OptimizationProblem
from .classic import BoothProblem, RosenbrockProblem, SchafferProblem, SphereProblem
from .dtlz import DTLZ2Problem
from .registry import ProblemSpec, available_problem_names, get_problem_specs, make_problem
from .types import ProblemProtocol
from .zdt import ZDT1Problem, ZDT2Problem

__all__ = [
    "OptimizationProblem",
    "ProblemProtocol",
    "SphereProblem",
    "BoothProblem",
    "RosenbrockProblem",
    "SchafferProblem",
    "ZDT1Problem",
    "ZDT2Problem",
    "DTLZ2Problem",
    "ProblemSpec",
    "available_problem_names",
    "get_problem_specs",
    "make_problem",
]
