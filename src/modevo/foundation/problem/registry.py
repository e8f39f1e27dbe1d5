"""
Name -> factory table for the bundled sample problems.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np

from modevo.foundation.exceptions import UnknownProblemError

from .base import OptimizationProblem
from .classic import BoothProblem, RosenbrockProblem, SchafferProblem, SphereProblem
from .dtlz import DTLZ2Problem
from .zdt import ZDT1Problem, ZDT2Problem

ProblemFactory = Callable[..., OptimizationProblem]


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a sample problem."""

    key: str
    label: str
    n_obj: int | None
    factory: ProblemFactory
    description: str = ""


_PROBLEM_SPECS: dict[str, ProblemSpec] = {
    spec.key: spec
    for spec in (
        ProblemSpec(
            "sphere",
            "Sphere",
            1,
            lambda rng, n_var=2: SphereProblem(n_var, rng),
            "Sum of squared genes, minimum 0 at the origin.",
        ),
        ProblemSpec("booth", "Booth", 1, BoothProblem, "Global minimum at (1, 3) with value 0."),
        ProblemSpec(
            "rosenbrock",
            "Rosenbrock",
            1,
            lambda rng, n_var=2, **kw: RosenbrockProblem(n_var, rng, **kw),
            "Curved valley, minimum 0 at (1, ..., 1).",
        ),
        ProblemSpec("schaffer", "Schaffer N.1", 2, SchafferProblem, "Pareto set x0 in [0, 2]."),
        ProblemSpec("zdt1", "ZDT1", 2, ZDT1Problem, "Convex Pareto front."),
        ProblemSpec("zdt2", "ZDT2", 2, ZDT2Problem, "Concave Pareto front."),
        ProblemSpec("dtlz2", "DTLZ2", None, DTLZ2Problem, "Spherical front, scalable objective count."),
    )
}


def get_problem_specs() -> dict[str, ProblemSpec]:
    return dict(_PROBLEM_SPECS)


def available_problem_names() -> tuple[str, ...]:
    return tuple(_PROBLEM_SPECS.keys())


def make_problem(name: str, rng: np.random.Generator, **kwargs: Any) -> OptimizationProblem:
    """Build a registered problem by (case-insensitive) name."""
    key = name.strip().lower()
    spec = _PROBLEM_SPECS.get(key)
    if spec is None:
        raise UnknownProblemError(name, list(available_problem_names()))
    return spec.factory(rng, **kwargs)


__all__ = ["ProblemSpec", "ProblemFactory", "get_problem_specs", "available_problem_names", "make_problem"]
