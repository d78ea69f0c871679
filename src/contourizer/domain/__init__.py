"""Domain models for contourizer.

This module contains the data models shared by every stage of the pipeline:
pixel buffers, masks, traced contours and shape buckets. Models are
independent of the imaging libraries used to decode files.

Key classes:
- Point: An integer pixel coordinate
- Contour: A closed boundary traced around one foreground component
- ImageData: A caller-supplied interleaved pixel buffer
- BitMask: The single-channel foreground/background mask
- ShapeKind: The primitive a contour is classified as
- ShapeCollection: Contours grouped by shape kind
"""

from contourizer.domain.contour import Contour, Point
from contourizer.domain.image import BACKGROUND, FOREGROUND, BitMask, ImageData
from contourizer.domain.shapes import ShapeCollection, ShapeKind

__all__: list[str] = [
    # Constants
    "BACKGROUND",
    "FOREGROUND",
    # Enums
    "ShapeKind",
    # Core types
    "Point",
    "Contour",
    "ImageData",
    "BitMask",
    "ShapeCollection",
]
