from typing import Optional


class TaskServiceError(Exception):
    """Base for errors the HTTP layer maps to a specific status and code."""

    code = "TASK_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class DuplicateTitleError(TaskServiceError):
    code = "DUPLICATE_TITLE"

    def __init__(self, titulo: str):
        self.titulo = titulo
        super().__init__("Já existe uma tarefa com este título")


class InvalidDueDateError(TaskServiceError):
    code = "INVALID_DUE_DATE"

    def __init__(self, data_vencimento):
        self.data_vencimento = data_vencimento
        super().__init__("A data de vencimento não pode ser anterior à data atual")


class TaskNotFoundError(TaskServiceError):
    code = "TASK_NOT_FOUND"

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__("Task not found")
