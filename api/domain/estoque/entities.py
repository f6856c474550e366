from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EstoqueItem:
    id: int
    nome: str


@dataclass
class Estoque:
    """Contador de quantidade por item. Nao ha invariante de nao-negatividade:
    entradas negativas sao aceitas como correcoes."""
    item: EstoqueItem
    quantidade: int = 0
    id: int | None = None  # None ate o primeiro insert

    @property
    def item_id(self) -> int:
        return self.item.id
