# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.database import get_db
from app.main import app
from app.services.database_service import DatabaseService

# --- Shared sample site, shaped like a real generator response ---

SAMPLE_HTML = (
    '<!DOCTYPE html>\n<html lang="en">\n<head>\n'
    '  <meta charset="UTF-8">\n  <title>Madrid Plumbing</title>\n'
    '  <link rel="stylesheet" href="styles.css">\n</head>\n<body>\n'
    '  <header><img class="logo" src="logo.png" alt="Madrid Plumbing logo"></header>\n'
    '  <section class="hero"><h1>Madrid Plumbing</h1><p>Fast repairs, fair prices.</p>\n'
    '    <img class="hero-image" src="hero.jpg" alt="A plumber at work" loading="lazy"></section>\n'
    '  <script src="script.js"></script>\n</body>\n</html>\n'
)

SAMPLE_CSS = (
    ":root {\n"
    "  --primary-color: #2563eb;\n"
    "  --secondary-color: #1e293b;\n"
    "  --accent-color: #f59e0b;\n"
    "}\n"
    "body { font-family: 'Inter', sans-serif; color: var(--secondary-color); }\n"
    ".btn { background: var(--primary-color); }\n"
)

SAMPLE_JS = "document.addEventListener('DOMContentLoaded', () => console.log('ready'));\n"


@pytest.fixture
def generated_site():
    """A fresh copy of a successful generator response."""
    return {"html": SAMPLE_HTML, "css": SAMPLE_CSS, "js": SAMPLE_JS}


@pytest.fixture
def db_session():
    """
    A NEW, CLEAN in-memory SQLite database for EACH test function.
    StaticPool keeps the single connection alive across sessions and threads.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(db_session):
    """A TestClient whose requests all use the per-test database."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
