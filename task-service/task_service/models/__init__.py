from .TaskCreate import TaskCreate, Priority, PRIORITIES, DEFAULT_PRIORITY
from .Task import Task, Status, INITIAL_STATUS
from .Envelope import SuccessResponse, ErrorResponse, ErrorBody

__all__ = [
    "TaskCreate",
    "Priority",
    "PRIORITIES",
    "DEFAULT_PRIORITY",
    "Task",
    "Status",
    "INITIAL_STATUS",
    "SuccessResponse",
    "ErrorResponse",
    "ErrorBody",
]
