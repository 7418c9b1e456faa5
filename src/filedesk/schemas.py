"""Request schemas for filedesk storage operations."""

from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from filedesk.core.exceptions import ValidationError

RequestT = TypeVar("RequestT", bound=BaseModel)


class UploadRequest(BaseModel):
    """Request for a time-limited upload authorization."""

    model_config = ConfigDict(extra="forbid")

    filename: str = Field(..., min_length=1, description="Original file name")
    content_type: str = Field(..., min_length=1, description="Declared MIME type")
    folder: Optional[str] = Field(
        default=None, description="Raw folder path; normalized before use"
    )


class DeleteRequest(BaseModel):
    """Request to delete a stored object by public URL or key."""

    model_config = ConfigDict(extra="forbid")

    url: Optional[str] = Field(default=None, description="Previously issued URL")
    key: Optional[str] = Field(default=None, description="Object key")

    @model_validator(mode="after")
    def require_url_or_key(self) -> "DeleteRequest":
        if not self.url and not self.key:
            raise ValueError("Missing file URL or key")
        return self


def parse_request(model: type[RequestT], **values: Any) -> RequestT:
    """Build a request model from raw values.

    Raises:
        ValidationError: If the values do not form a valid request
    """
    try:
        return model(**values)
    except PydanticValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        raise ValidationError(f"Invalid {model.__name__}: {messages}")
