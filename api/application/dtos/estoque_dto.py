from __future__ import annotations

from api.domain.estoque.entities import Estoque

from .base import CamelModel


class EstoqueDTO(CamelModel):
    id: int | None
    item_id: int
    nome_item: str
    quantidade_estoque: int

    @classmethod
    def from_domain(cls, e: Estoque) -> EstoqueDTO:
        return cls(
            id=e.id,
            item_id=e.item_id,
            nome_item=e.item.nome,
            quantidade_estoque=e.quantidade,
        )
