import secrets

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient

from migaddr.lib.bech32_address import Ed25519Address, format_modern_address
from migaddr.main import app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keeps conversions independent of the caller's environment."""
    monkeypatch.delenv("MIGADDR_HRP", raising=False)
    monkeypatch.delenv("MIGADDR_EXPLORER_URL", raising=False)


@pytest.fixture
def zero_address():
    """The all-zero Ed25519 address."""
    return Ed25519Address(bytes(32))


@pytest.fixture
def random_address():
    return Ed25519Address(secrets.token_bytes(32))


@pytest.fixture
def zero_bech32(zero_address):
    return format_modern_address(zero_address)


@pytest.fixture(scope="module")
def api_client():
    """Provides a client for the FastAPI application."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def cli_runner():
    return CliRunner()
