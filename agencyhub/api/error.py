from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """
    Unexpected failure surfaced to the client.

    The message is replaced with a generic one unless expose_message is set,
    which use cases only do for messages already written for end users.
    """

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        expose_message: bool = False,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.expose_message = expose_message
        super().__init__(base_error.message)
