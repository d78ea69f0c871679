"""Exception hierarchy for Contourizer."""


class ContourizerError(Exception):
    """Base exception for all Contourizer errors."""

    pass


class ImageError(ContourizerError):
    """Errors related to image buffers or image files."""

    pass


class ZeroSizeImage(ImageError):
    """Image has no rows or no columns."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Image must have positive size, got {width}x{height}")


class InvalidImageBuffer(ImageError):
    """Buffer length does not describe a whole number of channels per pixel."""

    def __init__(self, length: int, width: int, height: int) -> None:
        self.length = length
        self.width = width
        self.height = height
        super().__init__(
            f"Buffer of length {length} does not match a {width}x{height} image "
            f"with a positive whole number of channels"
        )


class ImageLoadError(ImageError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class OutputError(ContourizerError):
    """Errors related to writing results."""

    pass


class OutputSaveError(OutputError):
    """Error saving a result file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save output '{path}': {reason}")


class ConfigurationError(ContourizerError):
    """Invalid or unknown configuration option."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
