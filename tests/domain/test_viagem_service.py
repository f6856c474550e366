from datetime import datetime, timedelta
from decimal import Decimal

from api.application.services.viagem_service import ViagemService
from api.infrastructure.repositories.memoria_viagem_repo import MemoriaViagemRepo


def test_viagens_agendadas_datadas_a_partir_de_agora() -> None:
    agora = datetime(2025, 5, 1, 12, 0)
    service = ViagemService(MemoriaViagemRepo(relogio=lambda: agora))

    viagens = service.obter_viagens_agendadas()

    assert [v.destino for v in viagens] == ["Paris", "Londres", "Nova York"]
    assert [v.dt_viagem - agora for v in viagens] == [
        timedelta(days=1), timedelta(days=5), timedelta(days=10),
    ]
    assert viagens[0].preco == Decimal("3500.50")
