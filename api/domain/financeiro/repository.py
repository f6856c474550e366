from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Financeiro


class FinanceiroRepository(Protocol):
    def obter_por_id(self, id: int) -> Financeiro | None: ...
    def obter_todos(self) -> list[Financeiro]: ...
    def obter_por_tipo(self, tipo: str) -> list[Financeiro]: ...
    def obter_por_status(self, baixado: bool) -> list[Financeiro]: ...
    def obter_vencimentos(self, inicio: datetime, fim: datetime) -> list[Financeiro]: ...
    def adicionar(self, financeiro: Financeiro) -> None: ...
    def atualizar(self, financeiro: Financeiro) -> None: ...
    def remover(self, id: int) -> None: ...
