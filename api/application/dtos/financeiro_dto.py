# api/application/dtos/financeiro_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import Field, NaiveDatetime

from api.domain.financeiro.entities import Financeiro

from .base import CamelModel


class FinanceiroDTO(CamelModel):
    id: int
    descricao: str
    valor: str  # Decimal serializado como string
    tipo_financeiro: str
    baixado: bool
    dt_vencimento: str
    dt_cadastro: str | None
    dt_baixa: str | None

    @classmethod
    def from_domain(cls, f: Financeiro) -> FinanceiroDTO:
        return cls(
            id=f.id or 0,
            descricao=f.descricao,
            valor=str(f.valor),
            tipo_financeiro=f.tipo.value,
            baixado=f.baixado,
            dt_vencimento=f.dt_vencimento.isoformat(),
            dt_cadastro=f.dt_cadastro.isoformat() if f.dt_cadastro else None,
            dt_baixa=f.dt_baixa.isoformat() if f.dt_baixa else None,
        )


# Descricao e tipo entram como texto livre: a validacao (e a mensagem de erro)
# pertence ao FinanceiroService, nao ao pydantic. Datas sem fuso: a coluna
# TIMESTAMP nao guarda offset, entao valores com fuso sao recusados (422).
class FinanceiroCreateDTO(CamelModel):
    descricao: str | None = Field(default=None, max_length=500)
    valor: Decimal
    tipo_financeiro: str | None = None
    dt_vencimento: NaiveDatetime


class FinanceiroUpdateDTO(FinanceiroCreateDTO):
    pass


class BaixarDTO(CamelModel):
    baixado: bool


class VencimentoDTO(CamelModel):
    nova_data_vencimento: NaiveDatetime
