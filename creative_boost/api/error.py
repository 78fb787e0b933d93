from fastapi import status
from creative_boost.libs.result import Error


class ClientError(Exception):
    """Use case error surfaced to the HTTP caller"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


NOT_FOUND = "NOT_FOUND"


def not_found(message: str) -> ClientError:
    return ClientError(Error(code=NOT_FOUND, message=message), status_code=status.HTTP_404_NOT_FOUND)
