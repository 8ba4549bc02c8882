import logging
from typing import List, Optional, Protocol
from task_service.models import Task

logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    """Storage the creation service writes to. Uniqueness is the caller's job."""

    def insert(self, task: Task) -> None: ...

    def find_by_title_case_insensitive(self, titulo: str) -> Optional[Task]: ...

    def find_by_id(self, task_id: str) -> Optional[Task]: ...

    def list_all(self) -> List[Task]: ...


class InMemoryTaskStore:
    """Process-lifetime task collection, empty at startup."""

    def __init__(self):
        self._tasks: List[Task] = []

    def insert(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("stored task id=%s total=%s", task.id, len(self._tasks))

    def find_by_title_case_insensitive(self, titulo: str) -> Optional[Task]:
        wanted = titulo.casefold()
        for task in self._tasks:
            if task.titulo.casefold() == wanted:
                return task
        return None

    def find_by_id(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_all(self) -> List[Task]:
        return list(self._tasks)

    def count(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return self.count()

    def clear(self) -> None:
        self._tasks.clear()
