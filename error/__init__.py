class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class InvalidRequestError(ServerError):
    """Raised when request is invalid"""

    def __init__(self, msg="Invalid request", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class ResourceNotFoundError(ServerError):
    """Raised when requested resource is not found"""

    def __init__(self, msg="Resource not found", status_code=404):
        super().__init__(msg=msg, status_code=status_code)


def raise_for_result(result) -> None:
    """Raise the matching ServerError for an ``{"error": msg}`` store result.

    Messages ending in "not found" map to 404, everything else to 400.
    """
    if not isinstance(result, dict) or "error" not in result:
        return
    msg = result["error"]
    if msg.endswith("not found"):
        raise ResourceNotFoundError(msg=msg)
    raise InvalidRequestError(msg=msg)
