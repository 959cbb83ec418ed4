"""Shared constants and the generic client response shape."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SUCCESS_CODE = "S"
ERROR_CODE = "E"

# Log levels
INFO = "INFO"
ERROR = "ERROR"
DEBUG = "DEBUG"

# Database operations
SELECT = "SELECT"
INSERT = "INSERT"
UPDATE = "UPDATE"


@dataclass
class ClientDetailsResp:
    """Response envelope returned to clients."""

    details_arr: Any = None
    status: str = ""
    err_msg: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation with its JSON field names."""
        return {
            "respData": self.details_arr,
            "status": self.status,
            "errMsg": self.err_msg,
        }