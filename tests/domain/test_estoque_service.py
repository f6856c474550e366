from api.application.services.estoque_service import EstoqueService
from api.domain.estoque.entities import Estoque, EstoqueItem
from api.infrastructure.repositories.memoria_estoque_repo import MemoriaEstoqueRepo


def _service(dados: list[Estoque] | None = None) -> tuple[EstoqueService, MemoriaEstoqueRepo]:
    repo = MemoriaEstoqueRepo(dados)
    return EstoqueService(repo), repo


def test_adicionar_em_estoque_vazio_cria_entrada() -> None:
    service, repo = _service()

    service.adicionar_ao_estoque(1, "Widget", 10)

    estoque = repo.obter_por_item_id(1)
    assert estoque is not None
    assert estoque.quantidade == 10
    assert estoque.item.nome == "Widget"
    assert estoque.id == 1


def test_adicionar_duas_vezes_soma_quantidade() -> None:
    service, repo = _service()

    service.adicionar_ao_estoque(1, "Widget", 10)
    service.adicionar_ao_estoque(1, "Widget", 5)

    assert repo.obter_por_item_id(1).quantidade == 15  # type: ignore[union-attr]
    assert len(repo.listar()) == 1


def test_adicionar_item_existente_mantem_nome_original() -> None:
    service, repo = _service()
    service.adicionar_ao_estoque(1, "Widget", 1)
    service.adicionar_ao_estoque(1, "Outro nome", 1)
    assert repo.obter_por_item_id(1).item.nome == "Widget"  # type: ignore[union-attr]


def test_adicionar_quantidade_negativa_reduz_estoque() -> None:
    """Sem guarda de sinal: correcoes negativas passam direto."""
    service, repo = _service()
    service.adicionar_ao_estoque(1, "Widget", 3)
    service.adicionar_ao_estoque(1, "Widget", -5)
    assert repo.obter_por_item_id(1).quantidade == -2  # type: ignore[union-attr]


def test_novo_item_recebe_proximo_id() -> None:
    service, repo = _service([Estoque(id=7, quantidade=1, item=EstoqueItem(id=1, nome="A"))])
    service.adicionar_ao_estoque(2, "B", 4)
    assert repo.obter_por_item_id(2).id == 8  # type: ignore[union-attr]


def test_entregar_item_inexistente_retorna_false() -> None:
    service, _ = _service()
    assert service.entregar_do_estoque(42, 1) is False


def test_entregar_mais_que_o_disponivel_falha_sem_alterar() -> None:
    service, repo = _service()
    service.adicionar_ao_estoque(1, "Widget", 15)

    assert service.entregar_do_estoque(1, 20) is False
    assert repo.obter_por_item_id(1).quantidade == 15  # type: ignore[union-attr]


def test_entregar_tudo_zera_estoque() -> None:
    service, repo = _service()
    service.adicionar_ao_estoque(1, "Widget", 15)

    assert service.entregar_do_estoque(1, 15) is True
    assert repo.obter_por_item_id(1).quantidade == 0  # type: ignore[union-attr]


def test_entregar_zero_sempre_passa() -> None:
    service, repo = _service()
    service.adicionar_ao_estoque(1, "Widget", 0)
    assert service.entregar_do_estoque(1, 0) is True
    assert repo.obter_por_item_id(1).quantidade == 0  # type: ignore[union-attr]


def test_entregar_quantidade_negativa_aumenta_estoque() -> None:
    service, repo = _service()
    service.adicionar_ao_estoque(1, "Widget", 5)
    assert service.entregar_do_estoque(1, -3) is True
    assert repo.obter_por_item_id(1).quantidade == 8  # type: ignore[union-attr]
