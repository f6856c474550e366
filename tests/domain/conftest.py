# tests/domain/conftest.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from financeiro_fakes import AGORA, VENCIMENTO, FakeFinanceiroRepo

from api.application.services.financeiro_service import FinanceiroService
from api.domain.financeiro.entities import Financeiro
from api.domain.financeiro.value_objects import TipoFinanceiro


@pytest.fixture()
def repo() -> FakeFinanceiroRepo:
    """Um lancamento de Saída (id=1), vencendo em 2025-01-01, em aberto."""
    return FakeFinanceiroRepo([
        Financeiro(
            descricao="Aluguel",
            valor=Decimal("1500.00"),
            tipo=TipoFinanceiro.SAIDA,
            dt_vencimento=VENCIMENTO,
            dt_cadastro=datetime(2024, 12, 1),
        ),
    ])


@pytest.fixture()
def service(repo: FakeFinanceiroRepo) -> FinanceiroService:
    return FinanceiroService(repo, relogio=lambda: AGORA)
