"""Public package exports for adaptive_fec with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "FECConfig",
    "FECPolicy",
    "FECScheme",
    "NetworkStats",
    "PolicyDecision",
    "PolicyEngine",
    "create_controller",
    "load_fec_config",
    "lookup_overhead",
]

_EXPORT_MODULES: dict[str, str] = {
    "FECConfig": "adaptive_fec.utils.config",
    "load_fec_config": "adaptive_fec.utils.config",
    "FECPolicy": "adaptive_fec.domain.models",
    "FECScheme": "adaptive_fec.domain.models",
    "NetworkStats": "adaptive_fec.domain.models",
    "PolicyDecision": "adaptive_fec.domain.models",
    "PolicyEngine": "adaptive_fec.application.policy_engine",
    "create_controller": "adaptive_fec.controller",
    "lookup_overhead": "adaptive_fec.protection_table",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'adaptive_fec' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
