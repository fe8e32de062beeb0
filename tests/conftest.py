import os

# app 을 import 하기 전에 테스트용 설정
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["OPENAI_API_KEY"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from app.db.base import SessionLocal, engine, reset_db
from app.deps import get_question_generator
from app.main import app
from app.services.knowledge_ledger import KnowledgeLedger
from app.services.question_store import QuestionStore
from tests.factories import StubGenerator


@pytest.fixture(autouse=True)
def fresh_db():
    reset_db(engine)
    yield


@pytest.fixture
def db():
    with SessionLocal() as session:
        yield session


@pytest.fixture
def store(db):
    return QuestionStore(db)


@pytest.fixture
def ledger(db):
    return KnowledgeLedger(db)


@pytest.fixture
def stub_generator():
    stub = StubGenerator()
    app.dependency_overrides[get_question_generator] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_question_generator, None)


@pytest.fixture
def client(stub_generator):
    with TestClient(app) as c:
        yield c
