# opentdb/errors.py
from typing import Dict, Optional, Type


class OpenTDBError(Exception):
    """Base class for everything this package raises."""


class InputValidationError(OpenTDBError, ValueError):
    """Caller passed an argument the API cannot accept. Raised before any request."""


class TransportError(OpenTDBError):
    """Request never produced a usable response (network failure or HTTP error page)."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class DecodeError(OpenTDBError):
    """Response body did not have the expected shape."""


class TokenUsageError(OpenTDBError):
    """Session token operation invoked in the wrong state."""


class ResponseCodeError(DecodeError):
    code: int = -1
    description: str = ""

    def __init__(self, code: Optional[int] = None):
        if code is not None:
            self.code = code
        super().__init__(f"Code {self.code}: {self.describe()}")

    def describe(self) -> str:
        return self.description


class NoResultsError(ResponseCodeError):
    code = 1
    description = (
        "No Results | Could not return results. The API doesn't have enough questions for your query. "
        "(Ex. Asking for 50 Questions in a Category that only has 20.)"
    )


class InvalidParameterError(ResponseCodeError):
    code = 2
    description = (
        "Invalid Parameter | Contains an invalid parameter. Arguments passed in aren't valid. (Ex. Amount = Five)"
    )


class TokenNotFoundError(ResponseCodeError):
    code = 3
    description = "Token Not Found | Session Token does not exist."


class TokenEmptyError(ResponseCodeError):
    code = 4
    description = (
        "Token Empty | Session Token has returned all possible questions for the specified query. "
        "Resetting the Token is necessary."
    )


class RateLimitError(ResponseCodeError):
    code = 5
    description = (
        "Rate Limit | Too many requests have occurred. Each IP can only access the API once every 5 seconds."
    )


class UnknownResponseCodeError(ResponseCodeError):
    def describe(self) -> str:
        return f"Unknown | Invalid response code {self.code}."


_BY_CODE: Dict[int, Type[ResponseCodeError]] = {
    cls.code: cls
    for cls in (NoResultsError, InvalidParameterError, TokenNotFoundError, TokenEmptyError, RateLimitError)
}


def response_code_error(code: int) -> ResponseCodeError:
    cls = _BY_CODE.get(code)
    if cls is None:
        return UnknownResponseCodeError(code)
    return cls()
