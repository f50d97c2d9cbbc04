"""Pydantic request/response schemas for the Todo List API."""

from pydantic import BaseModel, Field, field_validator

from todolist.core.models import Priority, TodoItem


class CreateTodoRequest(BaseModel):
    title: str = Field(..., min_length=1)
    priority: Priority | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value


class TodoResponse(BaseModel):
    id: int
    title: str
    completed: bool
    priority: Priority
    priority_label: str
    priority_color: str

    @classmethod
    def from_item(cls, item: TodoItem) -> "TodoResponse":
        return cls(
            id=item.id,
            title=item.title,
            completed=item.is_completed,
            priority=item.priority,
            priority_label=item.priority.label,
            priority_color=item.priority.color,
        )


class TodoListResponse(BaseModel):
    todos: list[TodoResponse]
    total: int

    @classmethod
    def from_snapshot(cls, snapshot: tuple[TodoItem, ...]) -> "TodoListResponse":
        return cls(
            todos=[TodoResponse.from_item(item) for item in snapshot],
            total=len(snapshot),
        )


class PriorityOption(BaseModel):
    value: Priority
    label: str
    color: str


class PriorityListResponse(BaseModel):
    priorities: list[PriorityOption]
    default: Priority


class HealthResponse(BaseModel):
    status: str
    version: str
    items: int
