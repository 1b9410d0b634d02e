"""
Configuration module for the India Energy Balance Sankey generator.

This module contains default data paths and configurable parameters
for the pipeline that turns MoSPI energy balance figures into static
Sankey JSON files (one per fiscal year and unit).
"""

import re
from typing import Dict, Any

# Default data paths, relative to the repository root
DEFAULT_DATA_PATHS: Dict[str, str] = {
    "output_dir": "public/data/mospi",
    "overrides": "raw-data/consumption-overrides.json",
    "summary_csv": "",  # Empty string disables the run summary CSV
}

# Configurable pipeline parameters
DEFAULT_CONFIG: Dict[str, Any] = {
    # Fiscal years to generate, newest first
    "energy_years": [
        "2023-24", "2022-23", "2021-22", "2020-21", "2019-20", "2018-19",
        "2017-18", "2016-17", "2015-16", "2014-15", "2013-14", "2012-13",
    ],

    # Units to generate for every year (values are stored in KToE)
    "units": ["KToE", "PetaJoules"],

    # Year whose consumption figures are verified against the MoSPI API
    "verified_year": "2023-24",

    # MoSPI eSankhyiki API (no key required)
    "mospi_base_url": "https://api.mospi.gov.in/publisher/api/fetchData",
    "request_timeout": 30,  # seconds
    "page_limit": 200,  # API default is 10 rows per page
}

# Accepted unit strings
KNOWN_UNITS: list = ["KToE", "PetaJoules"]

FISCAL_YEAR_PATTERN = re.compile(r"^\d{4}-\d{2}$")


def get_config(custom_paths: Dict[str, str] = None,
               custom_params: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Get configuration dictionary with optional custom overrides.

    Args:
        custom_paths: Dictionary of custom data paths to override defaults
        custom_params: Dictionary of custom parameters to override defaults

    Returns:
        Combined configuration dictionary
    """
    config = {
        "paths": DEFAULT_DATA_PATHS.copy(),
        **DEFAULT_CONFIG.copy(),
    }
    config["energy_years"] = list(DEFAULT_CONFIG["energy_years"])
    config["units"] = list(DEFAULT_CONFIG["units"])

    if custom_paths:
        config["paths"].update(custom_paths)

    if custom_params:
        config.update(custom_params)

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration parameters.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ValueError: If configuration parameters are invalid
    """
    for year in config["energy_years"]:
        if not isinstance(year, str) or not FISCAL_YEAR_PATTERN.match(year):
            raise ValueError(f"energy_years entries must look like '2023-24', got {year!r}")

    for unit in config["units"]:
        if unit not in KNOWN_UNITS:
            raise ValueError(f"units must be among {KNOWN_UNITS}, got {unit!r}")

    if config["request_timeout"] <= 0:
        raise ValueError("request_timeout must be positive")

    if config["page_limit"] <= 0:
        raise ValueError("page_limit must be positive")
