"""Configuration settings for Contourizer."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class OutputFormat(str, Enum):
    """Format of the written result file."""

    JSON = "json"
    SVG = "svg"


class PreprocessConfig(BaseModel):
    """Configuration for turning a pixel buffer into a bit mask.

    Only used for buffers with more than one channel; single-channel
    buffers are taken as a ready-made mask.
    """

    model_config = ConfigDict(extra="forbid")

    blur: bool = Field(
        default=False,
        description="Apply a 3x3 box blur before thresholding",
    )
    threshold: float = Field(
        default=85.0,
        ge=0.0,
        le=255.0,
        description="Luminance cutoff; pixels at or above it are foreground",
    )
    invert: bool = Field(
        default=False,
        description="Treat pixels below the threshold as foreground instead",
    )


class SimplifyConfig(BaseModel):
    """Configuration for polyline simplification."""

    epsilon: float = Field(
        default=1.0,
        ge=0.0,
        description="Douglas-Peucker tolerance in pixels",
    )


class ShapeConfig(BaseModel):
    """Tolerances for the shape predicates used during approximation."""

    right_angle_tolerance: float = Field(
        default=10.0,
        ge=0.0,
        le=45.0,
        description="Maximum deviation from 90 degrees for rectangle corners",
    )
    square_tolerance: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Maximum relative difference between rectangle sides for a square",
    )
    circle_min_vertices: int = Field(
        default=6,
        ge=4,
        description="Minimum simplified vertex count for a circle",
    )
    circle_radius_tolerance: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Maximum relative deviation of vertex radii from their mean",
    )
    circle_min_circularity: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Minimum isoperimetric ratio 4*pi*area/perimeter^2",
    )


class OutputConfig(BaseModel):
    """Configuration for result files."""

    format: OutputFormat = Field(
        default=OutputFormat.JSON,
        description="Output file format",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        le=20.0,
        description="Stroke width of SVG outlines",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ContourizerSettings(BaseModel):
    """Main application settings."""

    preprocess: PreprocessConfig = Field(default_factory=PreprocessConfig)
    simplify: SimplifyConfig = Field(default_factory=SimplifyConfig)
    shapes: ShapeConfig = Field(default_factory=ShapeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

