"""Task data models."""

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """Task model.

    Attributes:
        id: Opaque unique identifier, assigned at creation
        description: Task text, never blank
        is_completed: Completion status (``isCompleted`` on the wire)
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    description: str
    is_completed: bool = Field(default=False, alias="isCompleted")

    def to_wire(self) -> dict:
        """Serialize using the JSON field names of the REST API."""
        return self.model_dump(by_alias=True)


class TaskCreate(BaseModel):
    """Request body for creating a task.

    A missing description is treated as empty and rejected by the store.
    """

    description: str = ""


class TaskUpdate(BaseModel):
    """Request body for updating a task.

    All fields are optional - only provided fields will be updated.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = None
    is_completed: bool | None = Field(default=None, alias="isCompleted", strict=True)

    def to_wire(self) -> dict:
        """Serialize only the supplied fields, by alias."""
        return self.model_dump(by_alias=True, exclude_none=True)
