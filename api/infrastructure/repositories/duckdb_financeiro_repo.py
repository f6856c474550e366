from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import duckdb

from api.domain.financeiro.entities import Financeiro
from api.domain.financeiro.value_objects import TipoFinanceiro

_COLUNAS = """
    id, descricao, valor, tipo_financeiro, baixado,
    dt_vencimento, dt_cadastro, dt_baixa
"""


class DuckDBFinanceiroRepo:
    """A conexao e compartilhada pelo processo e as rotas rodam no threadpool:
    cada chamada abre o proprio cursor, senao o resultado de uma thread pode
    ser lido por outra."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def obter_por_id(self, id: int) -> Financeiro | None:
        row = self._fetchone(
            f"SELECT {_COLUNAS} FROM financeiro WHERE id = ?",  # noqa: S608
            [id],
        )
        return self._hidratar(row) if row else None

    def obter_todos(self) -> list[Financeiro]:
        rows = self._fetchall(f"""
            SELECT {_COLUNAS} FROM financeiro
            ORDER BY dt_vencimento DESC
        """)  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def obter_por_tipo(self, tipo: str) -> list[Financeiro]:
        rows = self._fetchall(f"""
            SELECT {_COLUNAS} FROM financeiro
            WHERE tipo_financeiro = ?
            ORDER BY dt_vencimento DESC
        """, [tipo])  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def obter_por_status(self, baixado: bool) -> list[Financeiro]:
        rows = self._fetchall(f"""
            SELECT {_COLUNAS} FROM financeiro
            WHERE baixado = ?
            ORDER BY dt_vencimento DESC
        """, [baixado])  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def obter_vencimentos(self, inicio: datetime, fim: datetime) -> list[Financeiro]:
        """Limites inclusivos. Ordem crescente de vencimento."""
        rows = self._fetchall(f"""
            SELECT {_COLUNAS} FROM financeiro
            WHERE dt_vencimento >= ? AND dt_vencimento <= ?
            ORDER BY dt_vencimento ASC
        """, [inicio, fim])  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def adicionar(self, financeiro: Financeiro) -> None:
        """Atribui o id gerado pela sequence na propria instancia."""
        row = self._fetchone("""
            INSERT INTO financeiro
                (descricao, valor, tipo_financeiro, baixado,
                 dt_vencimento, dt_cadastro, dt_baixa)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            RETURNING id
        """, [
            financeiro.descricao,
            financeiro.valor,
            financeiro.tipo.value,
            financeiro.baixado,
            financeiro.dt_vencimento,
            financeiro.dt_cadastro,
            financeiro.dt_baixa,
        ])
        financeiro.id = int(row[0]) if row else None

    def atualizar(self, financeiro: Financeiro) -> None:
        self._executar("""
            UPDATE financeiro SET
                descricao = ?, valor = ?, tipo_financeiro = ?, baixado = ?,
                dt_vencimento = ?, dt_cadastro = ?, dt_baixa = ?
            WHERE id = ?
        """, [
            financeiro.descricao,
            financeiro.valor,
            financeiro.tipo.value,
            financeiro.baixado,
            financeiro.dt_vencimento,
            financeiro.dt_cadastro,
            financeiro.dt_baixa,
            financeiro.id,
        ])

    def remover(self, id: int) -> None:
        self._executar("DELETE FROM financeiro WHERE id = ?", [id])

    def _fetchone(self, sql: str, params: list[object] | None = None) -> tuple | None:  # type: ignore[type-arg]
        with self._conn.cursor() as cur:
            return cur.execute(sql, params).fetchone()

    def _fetchall(self, sql: str, params: list[object] | None = None) -> list[tuple]:  # type: ignore[type-arg]
        with self._conn.cursor() as cur:
            return cur.execute(sql, params).fetchall()

    def _executar(self, sql: str, params: list[object]) -> None:
        with self._conn.cursor() as cur:
            cur.execute(sql, params)

    def _hidratar(self, row: tuple) -> Financeiro:  # type: ignore[type-arg]
        return Financeiro(
            id=int(row[0]),
            descricao=str(row[1]),
            valor=Decimal(str(row[2])),
            tipo=TipoFinanceiro(str(row[3])),
            baixado=bool(row[4]),
            dt_vencimento=row[5],
            dt_cadastro=row[6] if isinstance(row[6], datetime) else None,
            dt_baixa=row[7] if isinstance(row[7], datetime) else None,
        )
