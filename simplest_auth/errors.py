from __future__ import annotations

from typing import Any, Dict, Optional


class AuthenticationRequired(Exception):
    """Raised by JSON endpoints when the request has no usable user.

    `SimplestAuth` answers it with a 401 body that points clients at the
    login view instead of redirecting them there.
    """

    status_code = 401
    code = "unauthorized"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message

    def to_dict(self, login_url: Optional[str] = None) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": {"login_url": login_url},
            }
        }
