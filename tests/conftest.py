"""
Shared fixtures: in-memory SQLite store, fake OpenAI / SendGrid clients
and a TestClient wired to them through dependency overrides.
"""

from datetime import date
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import Base, get_db
from main import app
from app.dependencies.clients import get_content_generator, get_mailer
from app.models.auth_models import User
from app.models.child_model import Child
from app.utils import newsletter_persister
from app.utils.content_generator import NewsletterContentGenerator
from app.utils.mailer import Mailer
from app.utils.security import hash_password, jwt_for_user


class FakeCompletions:
    """Stands in for client.chat.completions of the OpenAI SDK."""

    def __init__(self, content="SCIENCE: ...", error=None, response=None):
        self.content = content
        self.error = error
        self.response = response
        self.calls = []
        self.on_call = None

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.on_call:
            self.on_call()
        if self.error:
            raise self.error
        if self.response is not None:
            return self.response
        message = SimpleNamespace(role="assistant", content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


class FakeOpenAI:
    def __init__(self, **kwargs):
        self.chat = SimpleNamespace(completions=FakeCompletions(**kwargs))


class FakeSendGrid:
    """Stands in for SendGridAPIClient; records every Mail it is given."""

    def __init__(self, status_code=202, error=None, message_id="msg-123"):
        self.status_code = status_code
        self.error = error
        self.message_id = message_id
        self.sent = []

    def send(self, message):
        self.sent.append(message)
        if self.error:
            raise self.error
        return SimpleNamespace(
            status_code=self.status_code,
            headers={"X-Message-Id": self.message_id},
            body=b"",
        )


def fixed_date(day):
    """A `date` replacement whose today() returns `day`."""

    class FixedDate(date):
        @classmethod
        def today(cls):
            return day

    return FixedDate


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def openai_client():
    return FakeOpenAI()


@pytest.fixture
def generator(openai_client):
    return NewsletterContentGenerator(openai_client, model="gpt-4o-mini")


@pytest.fixture
def sendgrid_client():
    return FakeSendGrid()


@pytest.fixture
def mailer(sendgrid_client):
    return Mailer(sendgrid_client, from_email="newsletters@kidsnewsletter.com", from_name="Kids Newsletter")


@pytest.fixture
def client(db_session, generator, mailer):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_content_generator] = lambda: generator
    app.dependency_overrides[get_mailer] = lambda: mailer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_parent(db_session):
    def _make(email="parent@example.com", parent_name="Jamie", password="secret123"):
        user = User(email=email, parent_name=parent_name, password_hash=hash_password(password))
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def parent(make_parent):
    return make_parent()


@pytest.fixture
def auth_headers(parent):
    return {"Authorization": f"Bearer {jwt_for_user(parent.email)}"}


@pytest.fixture
def make_child(db_session):
    def _make(parent, **overrides):
        fields = {
            "name": "Emma",
            "age": 9,
            "grade": "3rd Grade",
            "interests": ["Space & Astronomy", "Animals"],
            "favorite_shows": None,
            "hobbies": None,
            "delivery_schedule": "daily",
            "is_active": True,
        }
        fields.update(overrides)
        child = Child(parent_id=parent.id, **fields)
        db_session.add(child)
        db_session.commit()
        db_session.refresh(child)
        return child

    return _make


@pytest.fixture
def child(make_child, parent):
    return make_child(parent)


@pytest.fixture
def freeze_today(monkeypatch):
    """Pins the date the persister sees."""

    def _freeze(day):
        monkeypatch.setattr(newsletter_persister, "date", fixed_date(day))

    return _freeze
