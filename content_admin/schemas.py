# content_admin/schemas.py
"""
Request payloads.

Each resource has an explicit create and update model. Unknown keys are
rejected instead of being forwarded to storage. Update models treat every
field as optional, but columns that are NOT NULL may not be sent as ``null``.
"""
from typing import List, Optional

from flask import request
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from content_admin.errors import ValidationError


class Payload(BaseModel):
    # The dashboard client sends camelCase (isAdmin, thumbnailUrl); snake_case is accepted too
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    def changes(self):
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class UpdatePayload(Payload):
    # Clients PUT the whole object back; its id must match the URL
    id: Optional[int] = None

    def check_id(self, record_id):
        if self.id is not None and self.id != record_id:
            raise ValidationError(f"Body id {self.id} does not match URL id {record_id}")
        return self


def _reject_null(value):
    if value is None:
        raise ValueError("may not be null")
    return value


# ----- Auth / accounts -----

class LoginRequest(Payload):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=256)


class AccountCreate(Payload):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=256)
    is_admin: bool = False
    # Sent as 0 by the user form; ignored
    id: Optional[int] = None


class AccountUpdate(UpdatePayload):
    username: Optional[str] = Field(None, min_length=1, max_length=150)
    # Empty or missing: keep the current password
    password: Optional[str] = Field(None, max_length=256)
    is_admin: Optional[bool] = None

    @field_validator("username", "is_admin")
    @classmethod
    def reject_nulls(cls, value):
        return _reject_null(value)


# ----- Content records -----

class BlogPostCreate(Payload):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    slug: Optional[str] = Field(None, max_length=255)
    excerpt: Optional[str] = Field(None, max_length=500)
    tags: List[str] = Field(default_factory=list)
    image_urls: List[str] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None
    published: bool = False


class BlogPostUpdate(UpdatePayload):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, max_length=255)
    excerpt: Optional[str] = Field(None, max_length=500)
    tags: Optional[List[str]] = None
    image_urls: Optional[List[str]] = None
    thumbnail_url: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("title", "content", "tags", "image_urls", "published")
    @classmethod
    def reject_nulls(cls, value):
        return _reject_null(value)


class ResearchDocumentCreate(Payload):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    slug: Optional[str] = Field(None, max_length=255)
    authors: Optional[str] = Field(None, max_length=500)
    tags: List[str] = Field(default_factory=list)
    image_urls: List[str] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None
    file_url: Optional[str] = None


class ResearchDocumentUpdate(UpdatePayload):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    summary: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, max_length=255)
    authors: Optional[str] = Field(None, max_length=500)
    tags: Optional[List[str]] = None
    image_urls: Optional[List[str]] = None
    thumbnail_url: Optional[str] = None
    file_url: Optional[str] = None

    @field_validator("title", "content", "summary", "tags", "image_urls")
    @classmethod
    def reject_nulls(cls, value):
        return _reject_null(value)


# ----- Supplement reference data -----

class SupplementCreate(Payload):
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field("General", min_length=1, max_length=100)


class SupplementUpdate(UpdatePayload):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=100)

    @field_validator("name", "category")
    @classmethod
    def reject_nulls(cls, value):
        return _reject_null(value)


def load_payload(schema):
    """Validate the JSON body of the current request against ``schema``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return schema.model_validate(data)
