# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

os.environ["API_SEED_ESTOQUE"] = "true"


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo a cada teste, com dois lancamentos deterministicos."""
    from api.infrastructure.duckdb_connection import aplicar_schema

    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)
    conn.execute("""
        INSERT INTO financeiro
            (descricao, valor, tipo_financeiro, baixado, dt_vencimento, dt_cadastro, dt_baixa)
        VALUES
            ('Salario', 5000.00, 'Entrada', FALSE, '2025-01-05 00:00:00', '2024-12-20 10:00:00', NULL),
            ('Aluguel', 1500.00, 'Saída', TRUE, '2025-01-10 00:00:00', '2024-12-20 10:00:00',
             '2025-01-09 08:00:00')
    """)
    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient com DuckDB injetado e store de estoque recem-semeado."""
    from api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.dependencies import get_estoque_repo
    get_estoque_repo.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
