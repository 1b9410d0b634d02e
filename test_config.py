"""Unit tests for configuration defaults and validation."""

import pytest

import config


def test_defaults():
    cfg = config.get_config()
    assert cfg["paths"]["output_dir"] == "public/data/mospi"
    assert len(cfg["energy_years"]) == 12
    assert cfg["energy_years"][0] == "2023-24"
    assert cfg["units"] == ["KToE", "PetaJoules"]
    config.validate_config(cfg)


def test_overrides_do_not_leak_into_defaults():
    cfg = config.get_config(custom_paths={"output_dir": "/tmp/x"})
    cfg["energy_years"].append("2024-25")
    assert config.DEFAULT_DATA_PATHS["output_dir"] == "public/data/mospi"
    assert len(config.DEFAULT_CONFIG["energy_years"]) == 12


@pytest.mark.parametrize("params", [
    {"energy_years": ["2023"]},
    {"units": ["TWh"]},
    {"request_timeout": 0},
    {"page_limit": -1},
])
def test_validation_errors(params):
    with pytest.raises(ValueError):
        config.validate_config(config.get_config(custom_params=params))
