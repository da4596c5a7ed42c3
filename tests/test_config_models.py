import json

import pytest
from pydantic import ValidationError

from adaptive_fec.utils.config import FECConfig, load_fec_config


def test_defaults_match_documented_values():
    config = FECConfig()

    assert config.scheme == "flexfec03"
    assert config.fec_enable_loss_rate == 0.03
    assert config.fec_disable_loss_rate == 0.01
    assert config.min_overhead == 0.0
    assert config.max_overhead == 0.25
    assert config.overhead_deadband == 0.02


def test_config_is_read_only():
    config = FECConfig()

    with pytest.raises(ValidationError):
        config.max_overhead = 0.5


def test_rejects_inverted_hysteresis_band():
    with pytest.raises(ValueError):
        FECConfig(fec_enable_loss_rate=0.01, fec_disable_loss_rate=0.05)


def test_rejects_inverted_overhead_bounds():
    with pytest.raises(ValueError):
        FECConfig(min_overhead=0.3, max_overhead=0.2)


def test_rejects_negative_deadband():
    with pytest.raises(ValueError):
        FECConfig(overhead_deadband=-0.01)


def test_accepts_equal_thresholds():
    config = FECConfig(fec_enable_loss_rate=0.02, fec_disable_loss_rate=0.02)

    assert config.fec_enable_loss_rate == config.fec_disable_loss_rate


def test_load_fec_config_from_json(tmp_path):
    path = tmp_path / "fec.json"
    path.write_text(json.dumps({"scheme": "FlexFEC03", "max_overhead": 0.4}), encoding="utf-8")

    config = load_fec_config(path)

    assert config.scheme == "flexfec03"
    assert config.max_overhead == 0.4
    assert config.overhead_deadband == 0.02


def test_load_fec_config_from_yaml(tmp_path):
    path = tmp_path / "fec.yaml"
    path.write_text("fec_enable_loss_rate: 0.05\nfec_disable_loss_rate: 0.02\n", encoding="utf-8")

    config = load_fec_config(path)

    assert config.fec_enable_loss_rate == 0.05
    assert config.fec_disable_loss_rate == 0.02


def test_load_fec_config_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "fec.yml"
    path.write_text("", encoding="utf-8")

    assert load_fec_config(path) == FECConfig()
