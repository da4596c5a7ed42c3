"""Per-scheme FEC policy controllers."""

from __future__ import annotations

import logging

from adaptive_fec.domain.models import FECScheme
from adaptive_fec.utils.config import FECConfig

from .base import FECController
from .flexfec03 import FlexFEC03Controller
from .unsupported import UnsupportedFECController

__all__ = [
    "FECController",
    "FlexFEC03Controller",
    "UnsupportedFECController",
    "create_controller",
    "list_schemes",
]

logger = logging.getLogger(__name__)

# Registry of implemented schemes
_CONTROLLERS: dict[FECScheme, type[FECController]] = {
    FECScheme.FLEXFEC03: FlexFEC03Controller,
}


def create_controller(config: FECConfig) -> FECController:
    """Create the controller for ``config.scheme``.

    Schemes without an implementation, including ``none`` and unknown
    identifiers, resolve to :class:`UnsupportedFECController`.
    """

    try:
        scheme = FECScheme(config.scheme)
    except ValueError:
        logger.warning(
            "fec_scheme_unsupported",
            extra={"scheme": config.scheme, "available": list_schemes()},
        )
        return UnsupportedFECController(config)

    controller_cls = _CONTROLLERS.get(scheme, UnsupportedFECController)
    return controller_cls(config)


def list_schemes() -> list[str]:
    """List schemes with a registered controller."""

    return [scheme.value for scheme in _CONTROLLERS]
