"""
Common API schemas.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ResponseStatus(str, Enum):
    """Response status enum."""

    SUCCESS = "success"
    ERROR = "error"


class BaseResponse(BaseModel):
    """Acknowledgement for requests that return no campaign state."""

    status: ResponseStatus = ResponseStatus.SUCCESS
    message: Optional[str] = None
