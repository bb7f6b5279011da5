import logging

import pytest


@pytest.fixture(autouse=True)
def propagar_logs(monkeypatch):
    """Os loggers do projeto não propagam para a raiz; nos testes o caplog precisa vê-los."""
    for nome in ('django', 'Ocorrencias'):
        monkeypatch.setattr(logging.getLogger(nome), 'propagate', True)
