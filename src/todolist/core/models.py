"""
Data models for todolist.
"""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A single to-do item as stored in the tasks table."""

    id: int = Field(..., description="Identifier assigned by the database")
    name: str = Field(..., description="Task text")

    model_config = {"from_attributes": True}

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create a Task from a database dictionary."""
        return cls(**data)

    def format_line(self) -> str:
        return f"{self.id}. {self.name}"
