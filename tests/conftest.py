"""
Fixtures compartilhadas: banco SQLite em memória, stores, fábricas e relógio controlável.
"""
import datetime as dt
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("TIMEZONE", "America/Sao_Paulo")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import fitcheck.models  # noqa: F401
from fitcheck.core.rbac import Role
from fitcheck.crud.checkin import CheckInStore
from fitcheck.crud.location import LocationStore
from fitcheck.crud.user import UserStore
from fitcheck.db.base import Base
from fitcheck.models.checkin import CheckIn
from fitcheck.core.clock import local_date

# quarta-feira, 15:00 em São Paulo
NOW = dt.datetime(2025, 3, 12, 18, 0, tzinfo=dt.timezone.utc)


class FrozenClock:
    """Relógio injetável: ``clock()`` devolve ``now``; ``advance`` move o ponteiro."""

    def __init__(self, now: dt.datetime = NOW):
        self.now = now

    def __call__(self) -> dt.datetime:
        return self.now

    def advance(self, **kwargs) -> dt.datetime:
        self.now = self.now + dt.timedelta(**kwargs)
        return self.now


@pytest.fixture
def db_engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def db(db_engine):
    Session = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def location_store(db):
    return LocationStore(db)


@pytest.fixture
def check_in_store(db):
    return CheckInStore(db)


@pytest.fixture
def user_store(db):
    return UserStore(db)


@pytest.fixture
def make_location(location_store):
    counter = {"n": 0}

    def _make(title="Test Gym", latitude=-23.5505, longitude=-46.6333, description=None, phone=None,
              created_at=None):
        counter["n"] += 1
        return location_store.create({
            "id": f"gym-{counter['n']}",
            "title": title,
            "description": description,
            "phone": phone,
            "latitude": latitude,
            "longitude": longitude,
            "created_at": created_at or NOW - dt.timedelta(days=365) + dt.timedelta(minutes=counter["n"]),
        })

    return _make


@pytest.fixture
def make_user(user_store):
    def _make(id="user-1", role=Role.USER, name=None):
        return user_store.create(id=id, name=name or id, role=role)

    return _make


@pytest.fixture
def make_check_in(db):
    """Insere direto na tabela, sem passar pelas regras (permite vários por usuário/dia)."""
    counter = {"n": 0}

    def _make(user_id="user-1", location_id="gym-1", created_at=NOW, validated_at=None, real_day=False):
        counter["n"] += 1
        if real_day:
            calendar_day = local_date(created_at)
        else:
            # dia sintético único, para não esbarrar na constraint diária
            calendar_day = dt.date(2000, 1, 1) + dt.timedelta(days=counter["n"])
        obj = CheckIn(
            id=f"checkin-{counter['n']}",
            user_id=user_id,
            location_id=location_id,
            created_at=created_at,
            calendar_day=calendar_day,
            validated_at=validated_at,
        )
        db.add(obj); db.commit(); db.refresh(obj)
        return obj

    return _make
