"""Core processing algorithms for contourizer.

This module contains the core algorithms for:

- Preprocessing (box blur, luminance threshold)
- Boundary tracing (Moore-Neighbor with Jacob's stopping criterion)
- Contour extraction (column-major scan, one trace per component)
- Simplification (Douglas-Peucker via shapely)
- Shape classification (point, line, triangle, rectangle, square, circle, polygon)

Key functions:
- box_blur: 3x3 box filter with clamped borders
- luminance: Rec. 709 luminance of a pixel array
- clockwise_neighbor: Next Moore neighbour to probe
- simplify_contour: Douglas-Peucker on an implicitly closed contour
- is_rectangle, is_square, is_circle: Shape predicates

Key classes:
- Preprocessor: Builds the bit mask of an image
- BoundaryTracer: Traces one component's contour
- ContourExtractor: Finds and traces every component once
- ShapeClassifier: Buckets contours into shapes
- ContourFinder: Public facade over the whole pipeline
- ImageProcessor: File-level orchestration with logging and output
"""

from contourizer.core.classifier import ShapeClassifier
from contourizer.core.extractor import ContourExtractor
from contourizer.core.finder import ContourFinder
from contourizer.core.geometry import (
    circularity,
    corner_angles,
    is_circle,
    is_rectangle,
    is_square,
    perimeter,
    signed_area,
)
from contourizer.core.preprocess import Preprocessor, box_blur, luminance, threshold_luminance
from contourizer.core.processor import ImageProcessor
from contourizer.core.simplify import simplify_contour, simplify_contours
from contourizer.core.tracer import BoundaryTracer, clockwise_neighbor

__all__ = [
    # Tracing classes
    "BoundaryTracer",
    "ContourExtractor",
    "ContourFinder",
    # Processor classes
    "ImageProcessor",
    "Preprocessor",
    "ShapeClassifier",
    # Functions
    "box_blur",
    "circularity",
    "clockwise_neighbor",
    "corner_angles",
    "is_circle",
    "is_rectangle",
    "is_square",
    "luminance",
    "perimeter",
    "signed_area",
    "simplify_contour",
    "simplify_contours",
    "threshold_luminance",
]
