from __future__ import annotations

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dashboard.cache.revalidation import PathCache
from dashboard.core.config import get_config
from dashboard.core.security import hash_password
from dashboard.database.db import build_engine
from dashboard.models import Base, Customer, User

DEMO_PASSWORD = "123456"


@pytest.fixture
def engine():
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def customer(db_session):
    row = Customer(name="Evil Rabbit", email="evil@rabbit.com", image_url="/customers/evil-rabbit.png")
    db_session.add(row)
    db_session.commit()
    db_session.refresh(row)
    return row


@pytest.fixture
def user(db_session):
    row = User(name="User", email="user@nextmail.com", hashed_password=hash_password(DEMO_PASSWORD))
    db_session.add(row)
    db_session.commit()
    db_session.refresh(row)
    return row


@pytest.fixture
def view_cache():
    return PathCache()


@pytest.fixture
def settings():
    return get_config()
