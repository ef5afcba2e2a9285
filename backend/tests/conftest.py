import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the test run off the real database and log directory
os.environ.setdefault("CITRONIX_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("CITRONIX_LOG_TO_FILE", "false")

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from database import build_engine, get_db
from models import Base


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Session bound to the in-memory database"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def app():
    from main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, engine):
    """TestClient whose requests use the in-memory database"""
    TestingSession = sessionmaker(bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)
