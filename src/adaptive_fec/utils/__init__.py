from .config import FECConfig, load_fec_config

__all__ = [
    "FECConfig",
    "load_fec_config",
]
