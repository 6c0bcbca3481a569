"""Custom business exception classes.

Each exception maps to a specific HTTP status code and error code
for consistent API error responses.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(AppError):
    """Raised when an operation references a key with no stored record."""

    def __init__(self, resource: str, key: int | str | tuple):
        self.resource = resource
        self.key = key
        super().__init__(
            message=f"{resource} {key!r} not found",
            error_code="NOT_FOUND",
            status_code=404,
        )


class NotOwnerError(AppError):
    """Raised when the caller mutates an asset it does not currently own."""

    def __init__(self, asset_id: int, caller: str):
        self.asset_id = asset_id
        self.caller = caller
        super().__init__(
            message=f"Caller {caller} is not the owner of asset {asset_id}",
            error_code="NOT_OWNER",
            status_code=403,
        )


class NotAuthorizedError(AppError):
    """Raised when the caller is not allowed to perform an issuer-only operation."""

    def __init__(self, caller: str, action: str):
        self.caller = caller
        self.action = action
        super().__init__(
            message=f"Caller {caller} is not authorized to {action}",
            error_code="NOT_AUTHORIZED",
            status_code=403,
        )


class InvalidDateRangeError(AppError):
    """Raised when a certification window does not strictly increase."""

    def __init__(self, certification_date: int, expiration_date: int):
        self.certification_date = certification_date
        self.expiration_date = expiration_date
        super().__init__(
            message=(
                f"Certification date {certification_date} must be earlier "
                f"than expiration date {expiration_date}"
            ),
            error_code="INVALID_DATE_RANGE",
            status_code=422,
        )


class ValueOutOfRangeError(AppError):
    """Raised when an integer field does not fit its 64-bit column."""

    def __init__(self, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(
            message=f"Value for '{field}' is outside the storable 64-bit range",
            error_code="VALUE_OUT_OF_RANGE",
            status_code=422,
        )


class MissingCallerError(AppError):
    """Raised when the host did not supply a caller identity."""

    def __init__(self, header: str):
        super().__init__(
            message=f"Missing caller identity header '{header}'",
            error_code="MISSING_CALLER",
            status_code=401,
        )


class AlreadyInitializedError(AppError):
    """Raised when the certification registry is initialized a second time."""

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(
            message=f"Certification registry already initialized with owner {owner}",
            error_code="ALREADY_INITIALIZED",
            status_code=409,
        )
