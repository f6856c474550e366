from __future__ import annotations


class ErroDeValidacao(ValueError):
    """Entrada rejeitada pela regra de negocio. A mensagem e exibida ao cliente
    sem alteracao, entao os textos sao fixos."""

    def __init__(self, mensagem: str) -> None:
        super().__init__(mensagem)
        self.mensagem = mensagem
