"""
Domain errors raised by the service layer.
The application maps every NotFoundError to a 404 response.
"""


class NotFoundError(LookupError):
    detail = "Not found"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.detail)

    @property
    def message(self) -> str:
        return self.args[0]


class MessageNotFound(NotFoundError):
    detail = "Message not found"


class UserNotFound(NotFoundError):
    detail = "User not found"
