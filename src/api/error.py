from typing import Dict

from fastapi import status
from libs.result import Error


class ApiError(Exception):
    """An `Error` result raised out of a route, with the status it maps to"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error, status_code: int = None):
        self.base_error = base_error
        if status_code is not None:
            self.status_code = status_code
        super().__init__(base_error.message)

    def body(self) -> Dict:
        return {"error": {"code": self.base_error.code, "message": self.base_error.message}}


class ClientError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class ServerError(ApiError):
    def __init__(self, base_error: Error):
        super().__init__(base_error)

    def body(self) -> Dict:
        # Driver and provider details stay in the log
        return {"error": {"code": self.base_error.code, "message": "Internal server error"}}


class FunctionError(ApiError):
    """Error of the invite-client-contact function, rendered as {error, details}"""

    def body(self) -> Dict:
        return {"error": self.base_error.message, "details": self.base_error.code}
