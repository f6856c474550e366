from enum import StrEnum

from api.domain.erros import ErroDeValidacao


class TipoFinanceiro(StrEnum):
    ENTRADA = "Entrada"
    SAIDA = "Saída"


TIPOS_PERMITIDOS: tuple[str, ...] = tuple(t.value for t in TipoFinanceiro)

MSG_TIPO_INVALIDO = f"Tipo financeiro inválido. Use: {', '.join(TIPOS_PERMITIDOS)}"


def validar_tipo(tipo: str | None) -> TipoFinanceiro:
    """Case-sensitive, sem normalizacao: 'entrada' e ' Entrada' sao rejeitados."""
    if tipo not in TIPOS_PERMITIDOS:
        raise ErroDeValidacao(MSG_TIPO_INVALIDO)
    return TipoFinanceiro(tipo)
