from enum import Enum


class GatewayErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED_REQUEST = "malformed_request"
    ENCODING = "encoding"
    TRANSPORT = "transport"
    UPSTREAM = "upstream"
    DECODING = "decoding"
    MISSING_RESULT = "missing_result"


class GatewayError(Exception):
    """Failure of a single upstream round trip, tagged with its kind."""

    def __init__(self, kind: GatewayErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message
