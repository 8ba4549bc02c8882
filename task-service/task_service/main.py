import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from task_service import config
from task_service.errors import (
    DuplicateTitleError,
    InvalidDueDateError,
    TaskNotFoundError,
    TaskServiceError,
)
from task_service.logging_setup import setup_logging
from task_service.models import TaskCreate
from task_service.providers import Clock, IdGenerator, SystemClock
from task_service.responses import error_response, success_response
from task_service.service import TaskCreationService
from task_service.store import InMemoryTaskStore, TaskStore

logger = logging.getLogger(__name__)

DUPLICATE_TITLE_MESSAGE = "Já existe uma tarefa com este título. Por favor, use um título diferente"
GENERIC_ERROR_MESSAGE = "Não foi possível processar a solicitação. Tente novamente mais tarde"
REQUIRED_FIELD_MESSAGES = {"titulo": "O título da tarefa é obrigatório"}

ERROR_STATUS = {
    DuplicateTitleError: 409,
    InvalidDueDateError: 400,
    TaskNotFoundError: 404,
}


def _validation_details(exc: RequestValidationError):
    details = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        msg = err.get("msg", "")
        if err.get("type") == "missing" and loc and loc[-1] in REQUIRED_FIELD_MESSAGES:
            msg = REQUIRED_FIELD_MESSAGES[loc[-1]]
        details.append({"loc": loc, "msg": msg, "type": err.get("type")})
    return details


def check_due_date(payload: TaskCreate, clock: Clock) -> None:
    """Reject a due date before today; today itself is allowed."""
    if payload.data_vencimento is not None and payload.data_vencimento < clock.today():
        raise InvalidDueDateError(payload.data_vencimento)


def create_app(
    store: Optional[TaskStore] = None,
    clock: Optional[Clock] = None,
    id_generator: Optional[IdGenerator] = None,
    system_user: Optional[str] = None,
) -> FastAPI:
    app = FastAPI(title="Task Service")
    clock = clock or SystemClock()
    service = TaskCreationService(
        store if store is not None else InMemoryTaskStore(),
        clock=clock,
        id_generator=id_generator,
        system_user=system_user or config.SYSTEM_USER,
    )
    app.state.service = service

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = _validation_details(exc)
        message = details[0]["msg"] if details else "Dados inválidos"
        logger.info("validation failed path=%s message=%s", request.url.path, message)
        return error_response(400, message, "VALIDATION_ERROR", details)

    @app.exception_handler(TaskServiceError)
    async def task_error_handler(request: Request, exc: TaskServiceError):
        status = ERROR_STATUS.get(type(exc), 400)
        message = DUPLICATE_TITLE_MESSAGE if isinstance(exc, DuplicateTitleError) else exc.message
        return error_response(status, message, exc.code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("unexpected error path=%s", request.url.path)
        return error_response(500, GENERIC_ERROR_MESSAGE, "INTERNAL_ERROR")

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.post("/tasks", status_code=201)
    async def create_task(task: TaskCreate):
        check_due_date(task, clock)
        created = service.create_task(task)
        return success_response(created, status_code=201)

    @app.get("/tasks")
    async def list_tasks():
        return success_response(service.list_tasks())

    @app.get("/tasks/{task_id}")
    async def get_task(task_id: str):
        return success_response(service.get_task(task_id))

    return app


setup_logging(config.LOG_LEVEL)
app = create_app()
