# tests/domain/financeiro_fakes.py
#
# Repositorio em memoria que registra as chamadas, para verificar que caminhos
# "nao encontrado" e entradas invalidas nunca persistem.
from __future__ import annotations

from datetime import datetime

from api.domain.financeiro.entities import Financeiro

AGORA = datetime(2025, 3, 10, 14, 30)
VENCIMENTO = datetime(2025, 1, 1)


class FakeFinanceiroRepo:
    def __init__(self, dados: list[Financeiro] | None = None) -> None:
        self.dados: dict[int, Financeiro] = {}
        self.chamadas: list[str] = []
        for f in dados or []:
            self.adicionar(f)
        self.chamadas.clear()

    def obter_por_id(self, id: int) -> Financeiro | None:
        self.chamadas.append("obter_por_id")
        return self.dados.get(id)

    def obter_todos(self) -> list[Financeiro]:
        self.chamadas.append("obter_todos")
        return sorted(self.dados.values(), key=lambda f: f.dt_vencimento, reverse=True)

    def obter_por_tipo(self, tipo: str) -> list[Financeiro]:
        self.chamadas.append("obter_por_tipo")
        return [f for f in self.dados.values() if f.tipo.value == tipo]

    def obter_por_status(self, baixado: bool) -> list[Financeiro]:
        self.chamadas.append("obter_por_status")
        return [f for f in self.dados.values() if f.baixado == baixado]

    def obter_vencimentos(self, inicio: datetime, fim: datetime) -> list[Financeiro]:
        self.chamadas.append("obter_vencimentos")
        return sorted(
            (f for f in self.dados.values() if inicio <= f.dt_vencimento <= fim),
            key=lambda f: f.dt_vencimento,
        )

    def adicionar(self, financeiro: Financeiro) -> None:
        self.chamadas.append("adicionar")
        financeiro.id = max(self.dados, default=0) + 1
        self.dados[financeiro.id] = financeiro

    def atualizar(self, financeiro: Financeiro) -> None:
        self.chamadas.append("atualizar")
        assert financeiro.id is not None
        self.dados[financeiro.id] = financeiro

    def remover(self, id: int) -> None:
        self.chamadas.append("remover")
        self.dados.pop(id, None)

    @property
    def escritas(self) -> list[str]:
        return [c for c in self.chamadas if c in {"adicionar", "atualizar", "remover"}]
