from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Viagem:
    id: int
    cliente: str
    dt_viagem: datetime
    destino: str
    preco: Decimal = Decimal("0.00")
    orcamento: Decimal = Decimal("0.00")
