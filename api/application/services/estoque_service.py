from __future__ import annotations

import logging

from api.domain.estoque.entities import Estoque, EstoqueItem
from api.domain.estoque.repository import EstoqueRepository

logger = logging.getLogger(__name__)


class EstoqueService:
    """Um contador de quantidade por item, sem validacao de sinal.

    Quantidade negativa em adicionar reduz o estoque; em entregar, aumenta.
    Correcoes e devolucoes usam esse caminho, entao nao ha guarda.
    """

    def __init__(self, repo: EstoqueRepository) -> None:
        self._repo = repo

    def obter_por_item(self, item_id: int) -> Estoque | None:
        return self._repo.obter_por_item_id(item_id)

    def listar(self) -> list[Estoque]:
        return self._repo.listar()

    def adicionar_ao_estoque(self, item_id: int, nome_item: str, quantidade: int) -> None:
        existente = self._repo.obter_por_item_id(item_id)
        if existente is None:
            novo = Estoque(item=EstoqueItem(id=item_id, nome=nome_item), quantidade=0)
            novo.quantidade += quantidade
            self._repo.adicionar(novo)
            logger.info("Item %s criado no estoque com %s unidade(s)", item_id, novo.quantidade)
            return

        existente.quantidade += quantidade
        self._repo.atualizar(existente)
        logger.info("Item %s agora com %s unidade(s)", item_id, existente.quantidade)

    def entregar_do_estoque(self, item_id: int, quantidade: int) -> bool:
        estoque = self._repo.obter_por_item_id(item_id)
        if estoque is None or estoque.quantidade < quantidade:
            return False

        estoque.quantidade -= quantidade
        self._repo.atualizar(estoque)
        logger.info("Entregue(s) %s unidade(s) do item %s", quantidade, item_id)
        return True
