"""Configuration management for contourizer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, library options or defaults.

Key classes:
- PreprocessConfig: Blur and threshold settings
- SimplifyConfig: Polyline simplification tolerance
- ShapeConfig: Tolerances for shape predicates
- OutputConfig: Result file settings
- LoggingConfig: Logging settings
- ContourizerSettings: Main application settings
"""

from contourizer.config.settings import (
    ContourizerSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    PreprocessConfig,
    ShapeConfig,
    SimplifyConfig,
)

__all__ = [
    "ContourizerSettings",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "PreprocessConfig",
    "ShapeConfig",
    "SimplifyConfig",
]
