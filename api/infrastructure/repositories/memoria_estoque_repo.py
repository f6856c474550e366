from __future__ import annotations

from api.domain.estoque.entities import Estoque, EstoqueItem


def estoque_inicial() -> list[Estoque]:
    """Fixtures carregadas uma vez, na construcao do repositorio."""
    return [
        Estoque(id=1, quantidade=50, item=EstoqueItem(id=1, nome="Teclado Mecânico")),
        Estoque(id=2, quantidade=20, item=EstoqueItem(id=2, nome="Mouse Gamer")),
        Estoque(id=3, quantidade=10, item=EstoqueItem(id=3, nome="Monitor 27''")),
    ]


class MemoriaEstoqueRepo:
    """Store em lista com vida igual a do processo. Nunca e resetado."""

    def __init__(self, dados: list[Estoque] | None = None) -> None:
        self._dados: list[Estoque] = list(dados) if dados else []

    def obter_por_item_id(self, item_id: int) -> Estoque | None:
        return next((e for e in self._dados if e.item_id == item_id), None)

    def listar(self) -> list[Estoque]:
        return list(self._dados)

    def adicionar(self, estoque: Estoque) -> None:
        estoque.id = max((e.id or 0 for e in self._dados), default=0) + 1
        self._dados.append(estoque)

    def atualizar(self, estoque: Estoque) -> None:
        existente = next((e for e in self._dados if e.id == estoque.id), None)
        if existente is not None:
            existente.quantidade = estoque.quantidade
