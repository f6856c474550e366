"""Regras de negocio dos lancamentos financeiros.

O repositorio nao valida nada: toda regra de entrada vive aqui.
"Nao encontrado" nunca e excecao, so retorno None/False.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from api.domain.erros import ErroDeValidacao
from api.domain.financeiro.entities import Financeiro
from api.domain.financeiro.repository import FinanceiroRepository
from api.domain.financeiro.value_objects import TipoFinanceiro, validar_tipo

logger = logging.getLogger(__name__)

MSG_DESCRICAO_OBRIGATORIA = "Descrição é obrigatória"
MSG_VALOR_INVALIDO = "Valor deve ser maior que zero"
MSG_PERIODO_INVALIDO = "Data início não pode ser maior que data fim"


def validar_lancamento(
    descricao: str | None,
    valor: Decimal,
    tipo: str | None,
) -> tuple[str, TipoFinanceiro]:
    """Ordem fixa: descricao -> valor -> tipo. Primeira falha vence.

    Retorna a descricao ja trimada e o tipo convertido para o enum.
    """
    if descricao is None or not descricao.strip():
        raise ErroDeValidacao(MSG_DESCRICAO_OBRIGATORIA)
    if valor <= 0:
        raise ErroDeValidacao(MSG_VALOR_INVALIDO)
    return descricao.strip(), validar_tipo(tipo)


class FinanceiroService:
    def __init__(
        self,
        repo: FinanceiroRepository,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._relogio = relogio

    def obter_por_id(self, id: int) -> Financeiro | None:
        return self._repo.obter_por_id(id)

    def obter_todos(self) -> list[Financeiro]:
        return self._repo.obter_todos()

    def obter_por_tipo(self, tipo: str) -> list[Financeiro]:
        validar_tipo(tipo)
        return self._repo.obter_por_tipo(tipo)

    def obter_por_status(self, baixado: bool) -> list[Financeiro]:
        return self._repo.obter_por_status(baixado)

    def obter_vencimentos(self, inicio: datetime, fim: datetime) -> list[Financeiro]:
        """Intervalo fechado [inicio, fim]; a comparacao fica com o repositorio."""
        if inicio > fim:
            raise ErroDeValidacao(MSG_PERIODO_INVALIDO)
        return self._repo.obter_vencimentos(inicio, fim)

    def adicionar(
        self,
        descricao: str | None,
        valor: Decimal,
        tipo: str | None,
        dt_vencimento: datetime,
    ) -> bool:
        descricao_ok, tipo_ok = self._validar(descricao, valor, tipo)
        financeiro = Financeiro(
            descricao=descricao_ok,
            valor=valor,
            tipo=tipo_ok,
            dt_vencimento=dt_vencimento,
            baixado=False,
            dt_cadastro=self._relogio(),
        )
        self._repo.adicionar(financeiro)
        logger.info("Lancamento %s adicionado (%s %s)", financeiro.id, tipo_ok, valor)
        return True

    def alterar_status_baixado(self, id: int, baixado: bool) -> bool:
        financeiro = self._repo.obter_por_id(id)
        if financeiro is None:
            return False

        # Reaplicar baixado=True re-carimba dt_baixa
        financeiro.baixar(baixado, self._relogio())
        self._repo.atualizar(financeiro)
        logger.info("Lancamento %s baixado=%s", id, baixado)
        return True

    def alterar_data_vencimento(self, id: int, nova_data: datetime) -> bool:
        financeiro = self._repo.obter_por_id(id)
        if financeiro is None:
            return False

        financeiro.dt_vencimento = nova_data
        self._repo.atualizar(financeiro)
        return True

    def atualizar(
        self,
        id: int,
        descricao: str | None,
        valor: Decimal,
        tipo: str | None,
        dt_vencimento: datetime,
    ) -> bool:
        financeiro = self._repo.obter_por_id(id)
        if financeiro is None:
            return False

        # Id inexistente retorna antes da validacao
        descricao_ok, tipo_ok = self._validar(descricao, valor, tipo)
        financeiro.descricao = descricao_ok
        financeiro.valor = valor
        financeiro.tipo = tipo_ok
        financeiro.dt_vencimento = dt_vencimento
        self._repo.atualizar(financeiro)
        logger.info("Lancamento %s atualizado", id)
        return True

    def remover(self, id: int) -> bool:
        if self._repo.obter_por_id(id) is None:
            return False

        self._repo.remover(id)
        logger.info("Lancamento %s removido", id)
        return True

    def _validar(
        self,
        descricao: str | None,
        valor: Decimal,
        tipo: str | None,
    ) -> tuple[str, TipoFinanceiro]:
        try:
            return validar_lancamento(descricao, valor, tipo)
        except ErroDeValidacao as err:
            logger.warning("Lancamento rejeitado: %s", err.mensagem)
            raise
