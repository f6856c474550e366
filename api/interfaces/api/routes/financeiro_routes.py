
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import NaiveDatetime

from api.application.dtos.base import MensagemDTO
from api.application.dtos.financeiro_dto import (
    BaixarDTO,
    FinanceiroCreateDTO,
    FinanceiroDTO,
    FinanceiroUpdateDTO,
    VencimentoDTO,
)
from api.application.services.financeiro_service import FinanceiroService
from api.domain.erros import ErroDeValidacao
from api.interfaces.api.dependencies import get_financeiro_service

router = APIRouter()

_NAO_ENCONTRADO = "Financeiro não encontrado"

# Rotas fixas (/vencimentos, /tipo, /status) ANTES de /financeiro/{id}


@router.get("/financeiro", response_model=list[FinanceiroDTO])
def obter_todos(
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> list[FinanceiroDTO]:
    return [FinanceiroDTO.from_domain(f) for f in service.obter_todos()]


@router.get("/financeiro/vencimentos", response_model=list[FinanceiroDTO])
def obter_vencimentos(
    data_inicio: NaiveDatetime = Query(alias="dataInicio"),
    data_fim: NaiveDatetime = Query(alias="dataFim"),
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> list[FinanceiroDTO]:
    try:
        financeiros = service.obter_vencimentos(data_inicio, data_fim)
    except ErroDeValidacao as err:
        raise HTTPException(status_code=400, detail=err.mensagem) from err
    return [FinanceiroDTO.from_domain(f) for f in financeiros]


@router.get("/financeiro/tipo/{tipo}", response_model=list[FinanceiroDTO])
def obter_por_tipo(
    tipo: str,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> list[FinanceiroDTO]:
    try:
        financeiros = service.obter_por_tipo(tipo)
    except ErroDeValidacao as err:
        raise HTTPException(status_code=400, detail=err.mensagem) from err
    return [FinanceiroDTO.from_domain(f) for f in financeiros]


@router.get("/financeiro/status/{baixado}", response_model=list[FinanceiroDTO])
def obter_por_status(
    baixado: bool,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> list[FinanceiroDTO]:
    return [FinanceiroDTO.from_domain(f) for f in service.obter_por_status(baixado)]


@router.get("/financeiro/{id}", response_model=FinanceiroDTO)
def obter_por_id(
    id: int,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> FinanceiroDTO:
    financeiro = service.obter_por_id(id)
    if financeiro is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return FinanceiroDTO.from_domain(financeiro)


@router.post("/financeiro", response_model=MensagemDTO)
def adicionar(
    dto: FinanceiroCreateDTO,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> MensagemDTO:
    try:
        service.adicionar(dto.descricao, dto.valor, dto.tipo_financeiro, dto.dt_vencimento)
    except ErroDeValidacao as err:
        raise HTTPException(status_code=400, detail=err.mensagem) from err
    return MensagemDTO(mensagem="Financeiro adicionado com sucesso")


@router.put("/financeiro/{id}/baixar", response_model=MensagemDTO)
def alterar_status_baixado(
    id: int,
    dto: BaixarDTO,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> MensagemDTO:
    if not service.alterar_status_baixado(id, dto.baixado):
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return MensagemDTO(mensagem="Status alterado com sucesso")


@router.put("/financeiro/{id}/vencimento", response_model=MensagemDTO)
def alterar_data_vencimento(
    id: int,
    dto: VencimentoDTO,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> MensagemDTO:
    if not service.alterar_data_vencimento(id, dto.nova_data_vencimento):
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return MensagemDTO(mensagem="Data de vencimento alterada com sucesso")


@router.put("/financeiro/{id}", response_model=MensagemDTO)
def atualizar(
    id: int,
    dto: FinanceiroUpdateDTO,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> MensagemDTO:
    try:
        sucesso = service.atualizar(
            id, dto.descricao, dto.valor, dto.tipo_financeiro, dto.dt_vencimento,
        )
    except ErroDeValidacao as err:
        raise HTTPException(status_code=400, detail=err.mensagem) from err
    if not sucesso:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return MensagemDTO(mensagem="Financeiro atualizado com sucesso")


@router.delete("/financeiro/{id}", response_model=MensagemDTO)
def remover(
    id: int,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> MensagemDTO:
    if not service.remover(id):
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return MensagemDTO(mensagem="Financeiro removido com sucesso")
