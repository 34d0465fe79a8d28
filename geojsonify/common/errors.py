"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for geojsonify failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class InputError(PipelineError):
    """Raised when an input document file cannot be read."""

    error_code = "INPUT_ERROR"


class GidError(PipelineError):
    """Raised when a document identifier cannot be resolved."""

    error_code = "GID_ERROR"


class AddendumDecodeError(PipelineError):
    """Raised when an addendum namespace cannot be decoded."""

    error_code = "ADDENDUM_DECODE_ERROR"


class ExtentError(PipelineError):
    """Raised when a bounding box cannot be computed from extent points."""

    error_code = "EXTENT_ERROR"
