from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

import numpy as np

from modevo.foundation.individual import Individual
from modevo.foundation.problem.types import ProblemProtocol

from . import EvaluationBackend


def _evaluate_one(problem: ProblemProtocol, individual: Individual) -> np.ndarray:
    return np.asarray(problem.calculate_fitness_values(individual), dtype=float)


class SerialEvalBackend(EvaluationBackend):
    """Synchronous in-process evaluation (default)."""

    def evaluate(self, individuals: Sequence[Individual], problem: ProblemProtocol) -> list[np.ndarray]:
        return [_evaluate_one(problem, ind) for ind in individuals]

    def close(self) -> None:
        return None


class ThreadPoolEvalBackend(EvaluationBackend):
    """
    Map-style evaluation across worker threads.

    Notes:
        - The problem must be stateless during evaluation or synchronize itself.
        - Results come back in input order; the first oracle exception propagates.
        - Worthwhile when evaluation releases the GIL (numpy, I/O, native code).
    """

    def __init__(self, n_workers: Optional[int] = None) -> None:
        self.n_workers = max(1, n_workers or os.cpu_count() or 1)
        self._executor: ThreadPoolExecutor | None = None

    def _ensure_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self.n_workers, thread_name_prefix="modevo-eval")
        return self._executor

    def evaluate(self, individuals: Sequence[Individual], problem: ProblemProtocol) -> list[np.ndarray]:
        if self.n_workers <= 1 or len(individuals) <= 1:
            return SerialEvalBackend().evaluate(individuals, problem)
        executor = self._ensure_executor()
        return list(executor.map(lambda ind: _evaluate_one(problem, ind), individuals))

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> ThreadPoolEvalBackend:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def resolve_eval_backend(name: str | None, *, n_workers: Optional[int] = None) -> EvaluationBackend:
    key = (name or "serial").lower()
    if key in {"thread", "threads", "threadpool"}:
        return ThreadPoolEvalBackend(n_workers=n_workers)
    if key == "serial":
        return SerialEvalBackend()
    raise ValueError(f"Unknown evaluation backend '{name}'. Expected 'serial' or 'threads'.")


__all__ = ["SerialEvalBackend", "ThreadPoolEvalBackend", "resolve_eval_backend"]
