from datetime import date, datetime
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

Priority = Literal["Alta", "Média", "Baixa"]
PRIORITIES = ("Alta", "Média", "Baixa")
DEFAULT_PRIORITY = "Média"

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class TaskCreate(BaseModel):
    """Body of POST /tasks. Shape rules only; business rules live in the service."""

    model_config = ConfigDict(extra="ignore")

    titulo: str
    descricao: Optional[str] = None
    prioridade: Priority = DEFAULT_PRIORITY
    data_vencimento: Optional[date] = None

    @field_validator("titulo", mode="before")
    @classmethod
    def check_titulo(cls, value):
        if not isinstance(value, str):
            raise PydanticCustomError("titulo_type", "O título da tarefa é obrigatório")
        if len(value) < TITLE_MIN_LENGTH:
            raise PydanticCustomError("titulo_too_short", "O título deve ter pelo menos 3 caracteres")
        if len(value) > TITLE_MAX_LENGTH:
            raise PydanticCustomError("titulo_too_long", "O título deve ter no máximo 100 caracteres")
        if not value.strip():
            raise PydanticCustomError(
                "titulo_blank", "O título não pode conter apenas espaços em branco"
            )
        return value

    @field_validator("descricao", mode="before")
    @classmethod
    def check_descricao(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise PydanticCustomError("descricao_type", "A descrição deve ser um texto")
        if len(value) > DESCRIPTION_MAX_LENGTH:
            raise PydanticCustomError(
                "descricao_too_long", "A descrição deve ter no máximo 500 caracteres"
            )
        return value

    @field_validator("prioridade", mode="before")
    @classmethod
    def check_prioridade(cls, value):
        if value is None:
            return DEFAULT_PRIORITY
        if value not in PRIORITIES:
            raise PydanticCustomError("prioridade_invalid", "Selecione uma prioridade válida")
        return value

    @field_validator("data_vencimento", mode="before")
    @classmethod
    def parse_data_vencimento(cls, value):
        # accepts "2099-01-01" as well as full ISO datetimes from a date picker
        if value is None or value == "":
            return None
        if isinstance(value, (date, datetime)):
            return value.date() if isinstance(value, datetime) else value
        if not isinstance(value, str):
            raise PydanticCustomError("data_vencimento_invalid", "Data de vencimento inválida")
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            raise PydanticCustomError(
                "data_vencimento_invalid", "Data de vencimento inválida"
            ) from None
