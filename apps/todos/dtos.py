"""DTOs for Todos app - immutable snapshots handed out by the store."""
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Task:
    """A single todo item. Callers never receive a mutable handle."""
    id: str
    title: str
    done: bool
    created_at: datetime
    updated_at: datetime
