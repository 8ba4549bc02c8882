import os

SYSTEM_USER = os.getenv("TASK_SYSTEM_USER", "system")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("TASK_SERVICE_HOST", "0.0.0.0")
PORT = int(os.getenv("TASK_SERVICE_PORT", "8000"))
