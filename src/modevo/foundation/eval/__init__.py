from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np

from modevo.foundation.individual import Individual
from modevo.foundation.problem.types import ProblemProtocol


class EvaluationBackend(Protocol):
    """Protocol for fitness evaluation backends."""

    def evaluate(self, individuals: Sequence[Individual], problem: ProblemProtocol) -> list[np.ndarray]:
        """Return one fitness vector per individual, in input order."""
        ...

    def close(self) -> None:  # pragma: no cover - optional for pooled backends
        """Clean up any resources (executors, pools)."""
        return None


from .backends import SerialEvalBackend, ThreadPoolEvalBackend, resolve_eval_backend  # noqa: E402

__all__ = ["EvaluationBackend", "SerialEvalBackend", "ThreadPoolEvalBackend", "resolve_eval_backend"]
