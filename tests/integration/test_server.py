from __future__ import annotations

import pytest


def test_main_sobe_uvicorn_com_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    chamadas: list[tuple[tuple[object, ...], dict[str, object]]] = []
    monkeypatch.setenv("API_HOST", "0.0.0.0")
    monkeypatch.setenv("API_PORT", "9123")

    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api import server
    monkeypatch.setattr(server.uvicorn, "run", lambda *a, **kw: chamadas.append((a, kw)))

    server.main()
    get_settings.cache_clear()

    assert chamadas == [(
        ("api.interfaces.api.main:app",),
        {"host": "0.0.0.0", "port": 9123, "log_level": "info", "reload": False},
    )]
