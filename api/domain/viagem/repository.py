from __future__ import annotations

from typing import Protocol

from .entities import Viagem


class ViagemRepository(Protocol):
    def obter_viagens_agendadas(self) -> list[Viagem]: ...
