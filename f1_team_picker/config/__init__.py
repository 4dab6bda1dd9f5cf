"""
F1 Team Picker Configuration Module

Provides centralized configuration management for the entire application.
Import the global config instance to access all configuration values.

Usage:
    from f1_team_picker.config import config

    # Access team search configuration
    penalty = config.optimization.transfer_penalty

    # Access raw payload expectations
    driver_count = config.data_contracts.expected_driver_count
"""

from .settings import (
    TeamPickerConfig,
    OptimizationConfig,
    DataContractConfig,
    config,
    load_config,
)

__all__ = [
    "TeamPickerConfig",
    "OptimizationConfig",
    "DataContractConfig",
    "config",
    "load_config",
]
