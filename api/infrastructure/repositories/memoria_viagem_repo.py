from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import Decimal

from api.domain.viagem.entities import Viagem


class MemoriaViagemRepo:
    """Lista fixa de viagens, datadas a partir do momento da consulta."""

    def __init__(self, relogio: Callable[[], datetime] = datetime.now) -> None:
        self._relogio = relogio

    def obter_viagens_agendadas(self) -> list[Viagem]:
        agora = self._relogio()
        return [
            Viagem(id=1, cliente="João", dt_viagem=agora + timedelta(days=1),
                   destino="Paris", preco=Decimal("3500.50"), orcamento=Decimal("4000.00")),
            Viagem(id=2, cliente="Maria", dt_viagem=agora + timedelta(days=5),
                   destino="Londres", preco=Decimal("4200.00"), orcamento=Decimal("4500.00")),
            Viagem(id=3, cliente="Carlos", dt_viagem=agora + timedelta(days=10),
                   destino="Nova York", preco=Decimal("5000.75"), orcamento=Decimal("5200.00")),
        ]
