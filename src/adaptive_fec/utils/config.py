from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FECConfig(BaseModel):
    """Thresholds and bounds shared read-only by the engine and its controller."""

    model_config = ConfigDict(frozen=True)

    scheme: str = "flexfec03"
    fec_enable_loss_rate: float = Field(0.03, ge=0.0, le=1.0)
    fec_disable_loss_rate: float = Field(0.01, ge=0.0, le=1.0)
    min_overhead: float = Field(0.0, ge=0.0, le=1.0)
    max_overhead: float = Field(0.25, ge=0.0, le=1.0)
    overhead_deadband: float = Field(0.02, ge=0.0)

    @field_validator("scheme", mode="before")
    @classmethod
    def _normalize_scheme(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def _validate_bands(self) -> "FECConfig":
        if self.fec_disable_loss_rate > self.fec_enable_loss_rate:
            raise ValueError(
                "fec_disable_loss_rate must be <= fec_enable_loss_rate."
            )
        if self.min_overhead > self.max_overhead:
            raise ValueError("min_overhead must be <= max_overhead.")
        return self


def load_fec_config(path: Path) -> FECConfig:
    data = _load_config_data(path)
    return FECConfig.model_validate(data)


def _load_config_data(path: Path) -> dict:
    if path.suffix.lower() in {".yaml", ".yml"}:
        import yaml

        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
