from __future__ import annotations

from api.domain.viagem.entities import Viagem

from .base import CamelModel


class ViagemDTO(CamelModel):
    id: int
    cliente: str
    dt_viagem: str
    destino: str
    preco: str
    orcamento: str

    @classmethod
    def from_domain(cls, v: Viagem) -> ViagemDTO:
        return cls(
            id=v.id,
            cliente=v.cliente,
            dt_viagem=v.dt_viagem.isoformat(),
            destino=v.destino,
            preco=str(v.preco),
            orcamento=str(v.orcamento),
        )
