from fastapi import APIRouter, Depends

from api.application.dtos.viagem_dto import ViagemDTO
from api.application.services.viagem_service import ViagemService
from api.interfaces.api.dependencies import get_viagem_service

router = APIRouter()


@router.get("/viagens", response_model=list[ViagemDTO])
def get_viagens(
    service: ViagemService = Depends(get_viagem_service),  # noqa: B008
) -> list[ViagemDTO]:
    return [ViagemDTO.from_domain(v) for v in service.obter_viagens_agendadas()]
