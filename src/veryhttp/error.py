from builtins import TimeoutError as _TimeoutError


class VeryhttpError(Exception):
    """Base class for veryhttp exceptions."""

    exit_code = 1


class ArgumentError(VeryhttpError, ValueError):
    """Invalid command-line argument was received."""

    exit_code = 2

    def __init__(self, token: str, reason: str):
        super().__init__(f"invalid argument '{token}': {reason}")
        self.token = token
        self.reason = reason


class UsageError(VeryhttpError):
    """The command line does not match the program usage."""

    exit_code = 2


class InvalidURLError(ArgumentError):
    """The URL argument is not a valid absolute URL."""


class MissingDelimiterError(ArgumentError):
    """A body argument is not of the form key=value."""

    def __init__(self, token: str):
        super().__init__(token, "expected key=value")


class ClientError(VeryhttpError, ConnectionError):
    """Transport-level failure while talking to the server: DNS resolution,
    connection, TLS or protocol errors. HTTP status codes are never reported
    as ClientError."""

    exit_code = 1


class TimeoutError(ClientError, _TimeoutError):
    """Operation timed out."""


class RenderError(VeryhttpError, ValueError):
    """The response could not be rendered, e.g. a body declared as JSON which
    does not parse as JSON."""

    exit_code = 3
