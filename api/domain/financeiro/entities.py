from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .value_objects import TipoFinanceiro


@dataclass
class Financeiro:
    """Lancamento financeiro. Mutavel: baixa, vencimento e atualizacao
    alteram a instancia carregada do repositorio antes de persistir."""
    descricao: str
    valor: Decimal
    tipo: TipoFinanceiro
    dt_vencimento: datetime
    baixado: bool = False
    dt_cadastro: datetime | None = None
    dt_baixa: datetime | None = None
    id: int | None = None  # atribuido pelo repositorio no insert

    def baixar(self, baixado: bool, agora: datetime) -> None:
        self.baixado = baixado
        self.dt_baixa = agora if baixado else None
