from functools import lru_cache

from api.application.services.estoque_service import EstoqueService
from api.application.services.financeiro_service import FinanceiroService
from api.application.services.viagem_service import ViagemService
from api.infrastructure.config import get_settings
from api.infrastructure.duckdb_connection import get_connection
from api.infrastructure.repositories.duckdb_financeiro_repo import DuckDBFinanceiroRepo
from api.infrastructure.repositories.memoria_estoque_repo import MemoriaEstoqueRepo, estoque_inicial
from api.infrastructure.repositories.memoria_viagem_repo import MemoriaViagemRepo


@lru_cache(maxsize=1)
def get_estoque_repo() -> MemoriaEstoqueRepo:
    """Um store por processo. Testes usam cache_clear() para recomecar."""
    seed = estoque_inicial() if get_settings().seed_estoque else None
    return MemoriaEstoqueRepo(seed)


def get_estoque_service() -> EstoqueService:
    return EstoqueService(repo=get_estoque_repo())


def get_financeiro_service() -> FinanceiroService:
    return FinanceiroService(repo=DuckDBFinanceiroRepo(get_connection()))


def get_viagem_service() -> ViagemService:
    return ViagemService(repo=MemoriaViagemRepo())
