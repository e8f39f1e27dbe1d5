from .loader import load_config, load_de_config

__all__ = ["load_config", "load_de_config"]
