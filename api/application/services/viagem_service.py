from __future__ import annotations

from api.domain.viagem.entities import Viagem
from api.domain.viagem.repository import ViagemRepository


class ViagemService:
    def __init__(self, repo: ViagemRepository) -> None:
        self._repo = repo

    def obter_viagens_agendadas(self) -> list[Viagem]:
        return self._repo.obter_viagens_agendadas()
