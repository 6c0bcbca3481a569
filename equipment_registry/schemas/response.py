"""Response envelopes shared by every namespace.

Both helpers return a ``(body, status)`` pair for a resource method to hand
back. Registry results go under ``data``; typed failures carry the
``error_code`` of the ``AppError`` that produced them.
"""


def success_response(data, status_code: int = 200):
    """Wrap a registry result in the success envelope.

    ``data`` may be ``None``: an absent record is a normal answer, not an error.
    """
    return {"status": "success", "data": data}, status_code


def error_response(
    message: str,
    error_code: str = "INTERNAL_ERROR",
    status_code: int = 500,
    details=None,
):
    """Wrap a typed registry failure in the error envelope."""
    body = {
        "status": "error",
        "error_code": error_code,
        "message": message,
    }
    if details:
        body["details"] = details
    return body, status_code
