from .base import EvolutionaryAlgorithm
from .config import DEConfig, DEConfigData
from .de import DifferentialEvolution, build_differential_evolution

__all__ = [
    "EvolutionaryAlgorithm",
    "DEConfig",
    "DEConfigData",
    "DifferentialEvolution",
    "build_differential_evolution",
]
