from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, build_engine, get_db
from main import app
from schemas import PlayerRequest
from core.player_manager import PlayerManager
from services.time_service import datetime_to_millis


def birthday(year: int, month: int = 1, day: int = 1) -> int:
    return datetime_to_millis(datetime(year, month, day))


@pytest.fixture
def engine():
    # 每個測試一個全新的 in-memory SQLite，StaticPool 讓所有 session 共用同一條連線
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_player(db):
    """建立玩家的 factory，預設值都合法，可用關鍵字覆蓋"""
    def _make_player(**overrides):
        data = {
            "name": "Hero",
            "title": "Wanderer",
            "race": "HUMAN",
            "profession": "WARRIOR",
            "birthday": birthday(2010),
            "experience": 100,
        }
        data.update(overrides)
        return PlayerManager.create_player(db, PlayerRequest(**data))

    return _make_player
