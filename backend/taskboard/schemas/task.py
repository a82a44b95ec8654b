"""Task Schemas: creation and sparse update bodies.

Invariants:
    - TaskCreate.title: stripped, non-empty; description stripped
    - TaskUpdate carries only the fields the client sent (exclude_unset)
    - In TaskUpdate, explicit null is accepted for dueDate only
    - priority is one of low|medium|high

Design Decisions:
    - camelCase aliases with populate_by_name: clients send boardId/dueDate,
      Python code reads board_id/due_date
    - to_updates() produces stored-document keys so routes pass it straight
      to TaskRepository.update
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from taskboard.core.domain_types import Priority

NULLABLE_UPDATE_FIELDS = {"due_date"}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(_CamelModel):
    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=10_000)
    due_date: str | None = Field(None, max_length=64)
    priority: Priority | None = None
    board_id: str = Field(min_length=1)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Task title is required")
        return v

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v


class TaskUpdate(_CamelModel):
    """Sparse update: unset fields are left untouched on the stored task."""
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = Field(None, max_length=10_000)
    status: str | None = Field(None, min_length=1, max_length=50)
    due_date: str | None = Field(None, max_length=64)
    completed: bool | None = None
    priority: Priority | None = None

    @model_validator(mode="after")
    def reject_nulls(self) -> "TaskUpdate":
        for name in self.model_fields_set - NULLABLE_UPDATE_FIELDS:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Task title cannot be empty")
        return v

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v

    def to_updates(self) -> dict:
        """Supplied fields only, keyed as in the stored document."""
        return self.model_dump(exclude_unset=True, by_alias=True, mode="json")


class TaskResponse(_CamelModel):
    id: str
    title: str
    description: str
    status: str
    completed: bool
    priority: str
    due_date: str | None
    board_id: str
    user_id: str
    created_at: str
    updated_at: str
