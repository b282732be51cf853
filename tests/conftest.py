"""Configuração do pytest para o Blog Pessoal."""

import os
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Banco em memória e bcrypt barato; precisa vir antes de importar config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["REQUIRE_AUTH"] = "true"

from fastapi.testclient import TestClient  # noqa: E402

from core.database import SessionLocal, engine  # noqa: E402
from models import Base  # noqa: E402

USUARIO = "maria"
SENHA = "123456"


@pytest.fixture(autouse=True)
def reset_db():
    """Recria o schema a cada teste."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from app import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def maria(client) -> dict:
    """Usuária cadastrada via API."""
    resp = client.post(
        "/usuarios/cadastrar",
        json={"nome": "Maria da Silva", "usuario": USUARIO, "senha": SENHA},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def auth(maria) -> tuple:
    """Credenciais Basic válidas para as rotas protegidas."""
    return (USUARIO, SENHA)
