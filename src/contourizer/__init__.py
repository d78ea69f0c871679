"""Contourizer - Trace shapes in bi-level images.

Contourizer extracts the closed boundary contours of foreground regions in a
black/white raster image with Moore-Neighbor tracing and classifies each
contour as a point, line, triangle, square, rectangle, circle or polygon.

Example:
    $ contourizer drawing.png --format svg

This will create drawing-contours.svg with one outline per traced shape.

Library use:
    from contourizer.core import ContourFinder
    from contourizer.domain import ImageData

    finder = ContourFinder(ImageData(pixels, width, height), {"threshold": 100})
    shapes = finder.approximate()
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
