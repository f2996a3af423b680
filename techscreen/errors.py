"""
Exceptions raised by the extraction and question pipelines.
"""


class TechscreenError(Exception):
    """Base class for all techscreen errors."""


class ModelServiceError(TechscreenError):
    """The completion endpoint could not be reached or refused the request."""


class MalformedModelResponseError(ModelServiceError):
    """The completion endpoint answered without a usable structured payload."""


class InterviewStateError(TechscreenError):
    """An interview session was used out of order."""
