from __future__ import annotations

from typing import Protocol

from .entities import Estoque


class EstoqueRepository(Protocol):
    def obter_por_item_id(self, item_id: int) -> Estoque | None: ...
    def listar(self) -> list[Estoque]: ...
    def adicionar(self, estoque: Estoque) -> None: ...
    def atualizar(self, estoque: Estoque) -> None: ...
