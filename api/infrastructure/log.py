# api/infrastructure/log.py
#
# Single logging setup for the API process.
#
#   - Modules log through logging.getLogger(__name__); only this function
#     touches handlers.
#   - Idempotent: TestClient re-enters the lifespan for every client fixture.
from __future__ import annotations

import logging
import sys

_FORMATO = "[api] %(asctime)s %(levelname)s %(name)s: %(message)s"


def configurar_logging(level: str = "INFO") -> None:
    root = logging.getLogger("api")
    root.setLevel(level)
    if any(getattr(h, "_panda_api", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMATO, datefmt="%H:%M:%S"))
    handler._panda_api = True  # type: ignore[attr-defined]
    root.addHandler(handler)
