import importlib
import json
import sys
from pathlib import Path

import pytest
from Crypto.Random import random as crypto_random

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

EXAMPLE_RECORD = {
    "expectedSecret": 1234,
    "prime": 2087,
    "shares": [
        {"x": 1, "y": 1494},
        {"x": 2, "y": 1942},
        {"x": 3, "y": 491},
    ],
}


def make_shares(secret, t, prime, n=None):
    """Polinomio aleatorio de grado t-1 con término independiente 'secret' (sólo para tests)."""
    n = t if n is None else n
    coeffs = [secret] + [crypto_random.randrange(prime) for _ in range(t - 1)]
    xs = []
    while len(xs) < n:
        x = crypto_random.randint(1, prime - 1)
        if x not in xs:
            xs.append(x)
    shares = []
    for x in xs:
        y = 0
        for coeff in reversed(coeffs):
            y = (y * x + coeff) % prime
        shares.append((x, y))
    return shares


@pytest.fixture(autouse=True)
def restore_core_config():
    """Recarga core.config tras cada test con el entorno ya restaurado."""
    yield
    importlib.reload(importlib.import_module("core.config"))


def _build_flask_app(monkeypatch, extra_env=None):
    monkeypatch.setenv("FRONTEND_ORIGIN", "http://127.0.0.1:5000")
    monkeypatch.delenv("SSS_STRICT_VALIDATION", raising=False)

    if extra_env:
        for key, value in extra_env.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    importlib.reload(importlib.import_module("core.config"))
    return importlib.reload(importlib.import_module("client.main"))


@pytest.fixture
def flask_env(monkeypatch):
    """Prepara la app Flask sin rate limiting y con validación estricta."""
    return _build_flask_app(monkeypatch, {"LIMITER_ENABLED": "false"})


@pytest.fixture
def lenient_flask_env(monkeypatch):
    """App Flask con la validación estricta desactivada."""
    extra_env = {
        "LIMITER_ENABLED": "false",
        "SSS_STRICT_VALIDATION": "false",
    }
    return _build_flask_app(monkeypatch, extra_env)


@pytest.fixture
def limited_flask_env(monkeypatch):
    """App Flask con rate limiting habilitado y umbral bajo para pruebas."""
    extra_env = {
        "LIMITER_ENABLED": "true",
        "LIMITER_DEFAULT_RATE": "3 per minute",
    }
    return _build_flask_app(monkeypatch, extra_env)


@pytest.fixture
def share_file(tmp_path):
    path = tmp_path / "shamir.json"
    path.write_text(json.dumps(EXAMPLE_RECORD), encoding="utf-8")
    return path
