# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para construir tokens y aislar el entorno.
# --------------------------------------------------------------

import base64
import json
from typing import Callable, Iterator

import pytest


def b64_std_unpadded(data: bytes) -> str:
    """Codifica en Base64 estándar eliminando el relleno."""

    return base64.b64encode(data).decode("ascii").rstrip("=")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables KEEPER_* del entorno durante cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.delenv("KEEPER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("KEEPER_SECRET_SIZE", raising=False)
    yield


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Construye tokens `header.payload.signature` con payload Base64 estándar.

    Returns:
        Callable: Función que recibe el payload (dict serializable o bytes).
    """

    header = b64_std_unpadded(b'{"alg":"HS256","typ":"JWT"}')

    def _make(payload) -> str:
        raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        return f"{header}.{b64_std_unpadded(raw)}.c2lnbmF0dXJl"

    return _make
