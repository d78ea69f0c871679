"""Image and result I/O layer for contourizer.

This module handles reading image files using Pillow and writing extraction
results. It keeps file formats out of the domain models and the core
algorithms.

Key responsibilities:
- Decode raster images into interleaved pixel buffers
- Export contours and shapes as JSON
- Render classified shapes as SVG outlines

Key classes:
- ImageReader: Load images into ImageData
- ResultWriter: Save extraction results
"""

from contourizer.io.reader import ImageReader
from contourizer.io.writer import ResultWriter, render_svg, result_to_dict

__all__ = [
    "ImageReader",
    "ResultWriter",
    "render_svg",
    "result_to_dict",
]
