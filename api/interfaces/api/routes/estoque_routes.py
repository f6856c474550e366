from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.base import MensagemDTO
from api.application.dtos.estoque_dto import EstoqueDTO
from api.application.services.estoque_service import EstoqueService
from api.interfaces.api.dependencies import get_estoque_service

router = APIRouter()


@router.get("/estoque", response_model=list[EstoqueDTO])
def listar_estoque(
    service: EstoqueService = Depends(get_estoque_service),  # noqa: B008
) -> list[EstoqueDTO]:
    return [EstoqueDTO.from_domain(e) for e in service.listar()]


@router.post("/estoque/adicionar", response_model=MensagemDTO)
def adicionar(
    item_id: int = Query(alias="itemId"),
    nome_item: str = Query(default="", alias="nomeItem"),
    quantidade: int = Query(),
    service: EstoqueService = Depends(get_estoque_service),  # noqa: B008
) -> MensagemDTO:
    service.adicionar_ao_estoque(item_id, nome_item, quantidade)
    return MensagemDTO(mensagem="Estoque atualizado com sucesso")


@router.post("/estoque/entregar", response_model=MensagemDTO)
def entregar(
    item_id: int = Query(alias="itemId"),
    quantidade: int = Query(),
    service: EstoqueService = Depends(get_estoque_service),  # noqa: B008
) -> MensagemDTO:
    if not service.entregar_do_estoque(item_id, quantidade):
        raise HTTPException(
            status_code=400,
            detail="Quantidade insuficiente ou item não encontrado",
        )
    return MensagemDTO(mensagem="Entrega realizada com sucesso")


@router.get("/estoque/{item_id}", response_model=EstoqueDTO)
def obter_por_item(
    item_id: int,
    service: EstoqueService = Depends(get_estoque_service),  # noqa: B008
) -> EstoqueDTO:
    estoque = service.obter_por_item(item_id)
    if estoque is None:
        raise HTTPException(status_code=404, detail="Item não encontrado no estoque")
    return EstoqueDTO.from_domain(estoque)
