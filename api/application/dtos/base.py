from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON em camelCase (dtVencimento, tipoFinanceiro); aceita snake_case na entrada."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MensagemDTO(CamelModel):
    mensagem: str
