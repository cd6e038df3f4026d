"""Exception types raised by emblgraph."""


class EmblGraphError(Exception):
    """Base class for all emblgraph errors."""
    pass


class GraphFormatError(EmblGraphError):
    """Raised when graph JSON input cannot be decoded or lacks required fields."""
    pass


class ConfigurationError(EmblGraphError):
    """Custom exception for configuration errors."""
    pass


class AnnotationFormatError(EmblGraphError):
    """Raised when an annotation file cannot be decoded as UTF-8 text."""
    pass
