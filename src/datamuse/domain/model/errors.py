"""Domain-level exceptions.

Request building raises the parameter errors; sending and parsing wrap
failures from httpx and pydantic so callers only need to catch
DatamuseError.
"""


class DatamuseError(Exception):
    """Base class for all library errors."""


class TransportError(DatamuseError):
    """Network, DNS, TLS or request-construction failure."""


class DecodeError(DatamuseError):
    """Response body does not match the expected JSON structure."""


class ParameterError(DatamuseError):
    """A query parameter is not allowed for the current request."""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(message)


class VocabularyError(ParameterError):
    """Parameter not available for the selected vocabulary list."""

    def __init__(self, vocabulary: str, parameter: str):
        self.vocabulary = vocabulary
        super().__init__(
            parameter,
            f"The parameter {parameter} is not yet supported for {vocabulary}",
        )


class EndPointError(ParameterError):
    """Parameter not intended for the selected endpoint."""

    def __init__(self, endpoint: str, parameter: str):
        self.endpoint = endpoint
        super().__init__(
            parameter,
            f"The parameter {parameter} is not supported for {endpoint}",
        )
