"""Differential evolution configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from difflib import get_close_matches
from numbers import Integral
from typing import Any, Dict, Tuple

from modevo.foundation.exceptions import ConfigurationError, InvalidParameterError, MissingConfigError

from .components.termination import TerminationCriterion, build_termination, termination_pair

DEFAULT_CR = 0.5
DEFAULT_F = 1.0
MIN_POP_SIZE = 4

_TERMINATION_KEYS = ("max_generations", "max_evaluations", "fitness_threshold")
_KNOWN_KEYS = ("pop_size", "cr", "CR", "f", "F", "termination") + _TERMINATION_KEYS


def _as_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value, "a real number") from None


@dataclass(frozen=True)
class DEConfigData:
    """
    Immutable optimization parameters for differential evolution.

    Attributes:
        pop_size: Individuals per generation; DE needs the parent plus three distinct others.
        cr: Crossover rate in [0, 1].
        f: Differential weight, strictly positive.
        termination: Criteria that must all agree before the run stops.
    """

    pop_size: int
    cr: float = DEFAULT_CR
    f: float = DEFAULT_F
    termination: Tuple[TerminationCriterion, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.pop_size, bool) or not isinstance(self.pop_size, Integral) or self.pop_size < MIN_POP_SIZE:
            raise InvalidParameterError("pop_size", self.pop_size, f"an integer >= {MIN_POP_SIZE}")
        cr = _as_float("cr", self.cr)
        f = _as_float("f", self.f)
        if not 0.0 <= cr <= 1.0:
            raise InvalidParameterError("cr", self.cr, "within [0, 1]")
        if not f > 0.0:
            raise InvalidParameterError("f", self.f, "> 0")
        object.__setattr__(self, "pop_size", int(self.pop_size))
        object.__setattr__(self, "cr", cr)
        object.__setattr__(self, "f", f)
        object.__setattr__(self, "termination", tuple(self.termination))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pop_size": self.pop_size,
            "cr": self.cr,
            "f": self.f,
            "termination": [termination_pair(criterion) for criterion in self.termination],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


class DEConfig:
    """
    Declarative configuration holder for differential evolution.
    Provides a fluent builder that yields an immutable DEConfigData.

    Examples:
        # Fluent builder
        cfg = DEConfig().pop_size(100).cr(0.9).f(0.8).max_generations(200).fixed()

        # Quick default configuration
        cfg = DEConfig.default()

        # From dictionary
        cfg = DEConfig.from_dict({"pop_size": 100, "cr": 0.5, "max_generations": 100})
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {"termination": []}

    @classmethod
    def default(cls, pop_size: int = 100, max_generations: int = 100) -> DEConfigData:
        """
        Create a default configuration (CR=0.5, F=1.0).

        Args:
            pop_size: Population size (default: 100)
            max_generations: Generation budget, generation 0 included (default: 100)
        """
        return cls().pop_size(pop_size).cr(DEFAULT_CR).f(DEFAULT_F).max_generations(max_generations).fixed()

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> DEConfigData:
        """
        Create configuration from a dictionary.

        Args:
            config: Dictionary with configuration keys:
                - pop_size (required): Population size
                - cr / CR: Crossover rate
                - f / F: Differential weight
                - max_generations, max_evaluations, fitness_threshold: termination shortcuts
                - termination: list of ``[kind, value]`` pairs or ``{kind: value}`` mapping

        Unknown keys raise :class:`ConfigurationError`.
        """
        unknown = [key for key in config if key not in _KNOWN_KEYS]
        if unknown:
            hints = sorted({m for key in unknown for m in get_close_matches(str(key), _KNOWN_KEYS, n=1, cutoff=0.6)})
            suggestion = f"Did you mean: {', '.join(hints)}?" if hints else f"Known keys: {', '.join(_KNOWN_KEYS)}"
            raise ConfigurationError(
                f"Unknown DE configuration key(s): {', '.join(map(str, unknown))}.",
                suggestion=suggestion,
                details={"unknown": unknown},
            )

        builder = cls()
        if "pop_size" in config:
            builder.pop_size(config["pop_size"])
        if "cr" in config or "CR" in config:
            builder.cr(config.get("cr", config.get("CR")))
        if "f" in config or "F" in config:
            builder.f(config.get("f", config.get("F")))

        for key in _TERMINATION_KEYS:
            if key in config:
                builder.termination(build_termination(key, config[key]))

        extra = config.get("termination")
        if isinstance(extra, dict):
            for kind, value in extra.items():
                builder.termination(build_termination(kind, value))
        elif extra:
            for kind, value in extra:
                builder.termination(build_termination(kind, value))

        return builder.fixed()

    def pop_size(self, value: int) -> DEConfig:
        self._cfg["pop_size"] = value
        return self

    def cr(self, value: float) -> DEConfig:
        self._cfg["cr"] = value
        return self

    def f(self, value: float) -> DEConfig:
        self._cfg["f"] = value
        return self

    def termination(self, *criteria: TerminationCriterion) -> DEConfig:
        self._cfg["termination"].extend(criteria)
        return self

    def max_generations(self, value: int) -> DEConfig:
        return self.termination(build_termination("max_generations", value))

    def max_evaluations(self, value: int) -> DEConfig:
        return self.termination(build_termination("max_evaluations", value))

    def fixed(self) -> DEConfigData:
        if "pop_size" not in self._cfg:
            raise MissingConfigError("pop_size", "DEConfig")
        return DEConfigData(
            pop_size=self._cfg["pop_size"],
            cr=self._cfg.get("cr", DEFAULT_CR),
            f=self._cfg.get("f", DEFAULT_F),
            termination=tuple(self._cfg["termination"]),
        )


__all__ = ["DEConfig", "DEConfigData", "DEFAULT_CR", "DEFAULT_F", "MIN_POP_SIZE"]
