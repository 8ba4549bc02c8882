from datetime import date

import pytest
from pydantic import ValidationError

from task_service.models import TaskCreate


def first_error(**payload):
    with pytest.raises(ValidationError) as exc_info:
        TaskCreate(**payload)
    return exc_info.value.errors()[0]


def test_defaults():
    task = TaskCreate(titulo="Call Bob")

    assert task.descricao is None
    assert task.prioridade == "Média"
    assert task.data_vencimento is None


def test_null_priority_falls_back_to_default():
    assert TaskCreate(titulo="Call Bob", prioridade=None).prioridade == "Média"


@pytest.mark.parametrize("titulo, message", [
    ("ab", "O título deve ter pelo menos 3 caracteres"),
    ("x" * 101, "O título deve ter no máximo 100 caracteres"),
    ("    ", "O título não pode conter apenas espaços em branco"),
])
def test_titulo_rules(titulo, message):
    assert first_error(titulo=titulo)["msg"] == message


def test_titulo_bounds_are_inclusive():
    assert TaskCreate(titulo="abc").titulo == "abc"
    assert len(TaskCreate(titulo="x" * 100).titulo) == 100


def test_descricao_limit():
    assert TaskCreate(titulo="Task", descricao="d" * 500).descricao == "d" * 500
    err = first_error(titulo="Task", descricao="d" * 501)
    assert err["msg"] == "A descrição deve ter no máximo 500 caracteres"


def test_empty_descricao_is_allowed():
    assert TaskCreate(titulo="Task", descricao="").descricao == ""


def test_invalid_priority():
    err = first_error(titulo="Task", prioridade="Urgente")
    assert err["msg"] == "Selecione uma prioridade válida"


@pytest.mark.parametrize("raw", ["2099-01-01", "2099-01-01T10:15:00Z", "2099-01-01T00:00:00.000Z"])
def test_due_date_formats(raw):
    assert TaskCreate(titulo="Task", data_vencimento=raw).data_vencimento == date(2099, 1, 1)


def test_empty_due_date_is_absent():
    assert TaskCreate(titulo="Task", data_vencimento="").data_vencimento is None


def test_invalid_due_date():
    err = first_error(titulo="Task", data_vencimento="next friday")
    assert err["msg"] == "Data de vencimento inválida"


def test_extra_fields_are_ignored():
    task = TaskCreate(titulo="Task", status="Concluída")
    assert not hasattr(task, "status")
