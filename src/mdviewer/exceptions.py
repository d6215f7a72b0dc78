"""Custom exceptions for mdviewer."""


class MdviewerError(Exception):
    """Base exception for mdviewer operations."""


class FetchError(MdviewerError):
    """Error during remote document fetching."""


class DocumentNotFoundError(FetchError):
    """Remote document does not exist."""


class DocumentLoadError(MdviewerError):
    """Error reading or decoding a local document."""
