from dataclasses import dataclass
from uuid import UUID


@dataclass(slots=True)
class Task:
    id: UUID
    title: str = ""
    description: str = ""
    is_completed: bool = False
