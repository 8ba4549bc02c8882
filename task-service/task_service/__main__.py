import uvicorn
from task_service import config

if __name__ == "__main__":
    uvicorn.run("task_service.main:app", host=config.HOST, port=config.PORT)
