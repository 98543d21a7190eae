"""Error codes for the platform and the registry that maps them to HTTP status."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus

# Codes may only be paired with one of these HTTP statuses.
ALLOWED_HTTP_STATUSES = frozenset({200, 400, 401, 403, 404, 500})

# Common: basic errors. Codes start with 1xxxxx.
ERR_SUCCESS = 100001  # 200: OK.
ERR_UNKNOWN = 100002  # 500: Internal server error.
ERR_BIND = 100003  # 400: Error occurred while binding the request body to the struct.
ERR_VALIDATION = 100004  # 400: Validation failed.
ERR_TOKEN_INVALID = 100005  # 401: Token invalid.
ERR_PAGE_NOT_FOUND = 100006  # 404: Page not found.

# Common: database errors.
ERR_DATABASE = 100101  # 500: Database error.

# Common: authorization and authentication errors.
ERR_ENCRYPT = 100201  # 401: Error occurred while encrypting the user password.
ERR_SIGNATURE_INVALID = 100202  # 401: Signature is invalid.
ERR_EXPIRED = 100203  # 401: Token expired.
ERR_INVALID_AUTH_HEADER = 100204  # 401: Invalid authorization header.
ERR_MISSING_HEADER = 100205  # 401: The `Authorization` header was empty.
ERR_PASSWORD_INCORRECT = 100206  # 401: Password was incorrect.
ERR_PERMISSION_DENIED = 100207  # 403: Permission denied.

# Common: encode/decode errors.
ERR_ENCODING_FAILED = 100301  # 500: Encoding failed due to an error with the data.
ERR_DECODING_FAILED = 100302  # 500: Decoding failed due to an error with the data.
ERR_INVALID_JSON = 100303  # 500: Data is not valid JSON.
ERR_ENCODING_JSON = 100304  # 500: JSON data could not be encoded.
ERR_DECODING_JSON = 100305  # 500: JSON data could not be decoded.
ERR_INVALID_YAML = 100306  # 500: Data is not valid Yaml.
ERR_ENCODING_YAML = 100307  # 500: Yaml data could not be encoded.
ERR_DECODING_YAML = 100308  # 500: Yaml data could not be decoded.

# apiserver: user errors.
ERR_USER_NOT_FOUND = 110001  # 404: User not found.
ERR_USER_ALREADY_EXIST = 110002  # 400: User already exist.

# apiserver: secret errors.
ERR_REACH_MAX_COUNT = 110101  # 400: Secret reach the max count.
ERR_SECRET_NOT_FOUND = 110102  # 404: Secret not found.

# apiserver: policy errors.
ERR_POLICY_NOT_FOUND = 110201  # 404: Policy not found.


@dataclass(frozen=True)
class ErrCode:
    """An error code with its HTTP status, user-facing text and reference document."""

    code: int
    http: int = 0
    ext: str = ""
    ref: str = ""

    def http_status(self) -> int:
        """The HTTP status for this code; 500 when none was given."""
        if self.http == 0:
            return int(HTTPStatus.INTERNAL_SERVER_ERROR)
        return self.http

    def __str__(self) -> str:
        return self.ext


_registry: dict[int, ErrCode] = {}


def register(code: int, http_status: int, message: str, *args: str) -> ErrCode:
    """Register an error code; the first extra argument, if any, is its reference.

    Raises ValueError for a disallowed HTTP status or a code already registered.
    """
    if http_status not in ALLOWED_HTTP_STATUSES:
        raise ValueError("http code not in `200, 400, 401, 403, 404, 500`")
    if code in _registry:
        raise ValueError(f"code: {code} already exist")
    coder = ErrCode(code=code, http=http_status, ext=message, ref=args[0] if args else "")
    _registry[code] = coder
    return coder


def lookup(code: int) -> ErrCode:
    """Return the registered ErrCode for code; raises KeyError if unknown."""
    try:
        return _registry[code]
    except KeyError:
        raise KeyError(f"code {code} is not registered") from None