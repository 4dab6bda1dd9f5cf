"""
Global Configuration System for F1 Team Picker

Centralized configuration management for the game rules and input contracts.
Provides type-safe configuration with validation and environment variable support.
"""

import json
import os
from typing import Dict, List, Optional
from pathlib import Path
from loguru import logger
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "F1TP_"


class OptimizationConfig(BaseModel):
    """Team Search Configuration"""

    # Team shape
    drivers_per_team: int = Field(
        default=5, description="Drivers in every fantasy team", ge=1, le=10
    )
    constructors_per_team: int = Field(
        default=2, description="Constructors in every fantasy team", ge=1, le=5
    )

    # Transfer costs and penalties
    transfer_penalty: float = Field(
        default=10.0,
        description="Points penalty per transfer beyond free transfers",
        ge=0.0,
        le=50.0,
    )
    chip_free_transfers: int = Field(
        default=7,
        description="Free transfers granted by the Wildcard and Limitless chips",
        ge=0,
        le=20,
    )

    # Output
    max_candidates: int = Field(
        default=20, description="Number of ranked teams returned", ge=1, le=500
    )


class DataContractConfig(BaseModel):
    """Raw Extraction Payload Configuration"""

    expected_driver_count: int = Field(
        default=20, description="Drivers expected in an extracted drivers table", ge=5
    )
    expected_constructor_count: int = Field(
        default=10,
        description="Constructors expected in an extracted constructors table",
        ge=2,
    )
    identifier_fields: List[str] = Field(
        default_factory=lambda: ["DR", "CN", "id"],
        description="Record fields holding the entity identifier, checked in order",
    )

    @field_validator("identifier_fields")
    @classmethod
    def validate_identifier_fields(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("identifier_fields must not be empty")
        return v


class TeamPickerConfig(BaseModel):
    """Master Team Picker Configuration Container"""

    optimization: OptimizationConfig = Field(
        default_factory=OptimizationConfig, description="Optimization Configuration"
    )
    data_contracts: DataContractConfig = Field(
        default_factory=DataContractConfig,
        description="Data Contract Configuration",
    )


def _parse_env_value(value: str):
    """Convert an environment string to bool, int, float or JSON list."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    if value.startswith("["):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    try:
        return float(value)
    except ValueError:
        return value


def _env_overrides(environ: Dict[str, str]) -> Dict[str, Dict]:
    """Collect F1TP_{SECTION}_{FIELD} overrides.

    Section names may themselves contain underscores, so the longest known
    section name matching the variable is used.
    """
    sections = sorted(TeamPickerConfig.model_fields, key=len, reverse=True)
    overrides: Dict[str, Dict] = {}

    for env_var, value in environ.items():
        if not env_var.startswith(ENV_PREFIX):
            continue
        remainder = env_var[len(ENV_PREFIX) :].lower()
        for section in sections:
            if remainder.startswith(section + "_"):
                field = remainder[len(section) + 1 :]
                overrides.setdefault(section, {})[field] = _parse_env_value(value)
                break
        else:
            logger.warning(f"Ignoring unknown configuration variable {env_var}")

    return overrides


def load_config(
    config_path: Optional[Path] = None,
    config_data: Optional[Dict] = None,
    environ: Optional[Dict[str, str]] = None,
) -> TeamPickerConfig:
    """
    Load configuration with environment variable overrides and optional config file

    Args:
        config_path: Optional path to JSON configuration file
        config_data: Optional dictionary of configuration data
        environ: Environment mapping to read overrides from (defaults to os.environ)

    Environment variables can override any config value using the pattern:
    F1TP_{SECTION}_{FIELD} = value

    Example: F1TP_OPTIMIZATION_TRANSFER_PENALTY=5
    """
    config_dict: Dict = {}

    if config_path and config_path.exists():
        try:
            with open(config_path, "r") as f:
                if config_path.suffix.lower() == ".json":
                    config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {config_path}: {e}")

    if config_data:
        for section, fields in config_data.items():
            config_dict.setdefault(section, {}).update(fields)

    env = os.environ if environ is None else environ
    for section, fields in _env_overrides(env).items():
        config_dict.setdefault(section, {}).update(fields)

    try:
        return TeamPickerConfig(**config_dict)
    except ValueError as e:
        logger.warning(f"Configuration validation failed: {e}")
        logger.warning("Using default configuration...")
        return TeamPickerConfig()


# Global configuration instance
config = load_config()
