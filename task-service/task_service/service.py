import logging
import threading
from typing import List, Optional
from task_service.errors import DuplicateTitleError, TaskNotFoundError
from task_service.models import DEFAULT_PRIORITY, INITIAL_STATUS, Task, TaskCreate
from task_service.providers import Clock, IdGenerator, SystemClock, uuid4_text
from task_service.store import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_USER = "system"


class TaskCreationService:
    """
    Turns validated TaskCreate payloads into stored Task records.

    The duplicate check and the insert run under one lock, so two requests
    with the same title cannot both pass the check.
    """

    def __init__(
        self,
        store: TaskStore,
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
        system_user: str = DEFAULT_SYSTEM_USER,
    ):
        self.store = store
        self.clock = clock or SystemClock()
        self.id_generator = id_generator or uuid4_text
        self.system_user = system_user
        self._lock = threading.Lock()

    def create_task(self, params: TaskCreate) -> Task:
        with self._lock:
            existing = self.store.find_by_title_case_insensitive(params.titulo)
            if existing is not None:
                logger.info("rejected duplicate title=%r existing id=%s", params.titulo, existing.id)
                raise DuplicateTitleError(params.titulo)

            task = Task(
                id=self.id_generator(),
                titulo=params.titulo,
                descricao=params.descricao or "",
                prioridade=params.prioridade or DEFAULT_PRIORITY,
                data_vencimento=params.data_vencimento,
                status=INITIAL_STATUS,
                data_criacao=self.clock.now().isoformat(),
                usuario_criador=self.system_user,
            )
            self.store.insert(task)

        logger.info("created task id=%s title=%r", task.id, task.titulo)
        return task

    def list_tasks(self) -> List[Task]:
        return self.store.list_all()

    def get_task(self, task_id: str) -> Task:
        task = self.store.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
