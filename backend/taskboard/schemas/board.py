"""Board Schemas: board names are trimmed and must not be blank."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BoardWrite(BaseModel):
    """Body for both create and rename."""
    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Board name is required")
        return v


class BoardResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    user_id: str
    created_at: str


class MessageResponse(BaseModel):
    message: str
