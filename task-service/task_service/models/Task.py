from datetime import date
from pydantic import BaseModel, ConfigDict
from typing import Optional, Literal
from .TaskCreate import Priority

Status = Literal["Pendente", "Em Progresso", "Concluída"]
INITIAL_STATUS = "Pendente"


class Task(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    titulo: str
    descricao: str = ""
    prioridade: Priority
    data_vencimento: Optional[date] = None
    status: Status = INITIAL_STATUS
    data_criacao: str
    usuario_criador: str
