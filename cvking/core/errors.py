"""
Errors raised by the CVKing API client and upload helper.
"""
from typing import Any, Optional


class ApiError(Exception):
    """
    A CVKing API call failed.

    status_code is None when the request never got a response
    (connection refused, timeout).
    """

    def __init__(self, status_code: Optional[int], detail: Any = None, message: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        self.message = message or self._message_from(detail)
        super().__init__(f"API error {status_code}: {self.message}")

    @staticmethod
    def _message_from(detail: Any) -> str:
        if isinstance(detail, dict) and detail.get("message"):
            message = detail["message"]
            # NestJS validation errors carry a list of messages
            if isinstance(message, list):
                return "; ".join(str(m) for m in message)
            return str(message)
        if isinstance(detail, dict) and detail.get("detail"):
            return str(detail["detail"])
        if detail:
            return str(detail)
        return "Request failed"

    @classmethod
    def from_response(cls, response) -> "ApiError":
        try:
            detail = response.json()
        except ValueError:
            detail = response.text
        return cls(response.status_code, detail)


class UploadValidationError(ValueError):
    """The file was refused before any request was sent."""
