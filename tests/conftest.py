"""
Shared fixtures: an in-memory SQLite database per test and a TestClient
whose session dependency is pointed at it.
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from app.core.security import create_access_token, get_password_hash
from app.db.session import build_engine, create_db_and_tables, get_session
from app.main import app
from app.models.cart import Cart
from app.models.item import Item
from app.models.user import User


@pytest.fixture(name="engine")
def engine_fixture():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    create_db_and_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="items")
def items_fixture(session: Session):
    """Catalog used by the cart and order tests: id 1 costs 10.99, id 2 costs 5.00."""
    widget = Item(id=1, name="Round Widget", price=Decimal("10.99"), description="A widget that is round")
    gadget = Item(id=2, name="Square Widget", price=Decimal("5.00"), description="A widget that is square")
    session.add(widget)
    session.add(gadget)
    session.commit()
    return [widget, gadget]


def make_user(session: Session, username: str, with_cart: bool = True) -> User:
    user = User(username=username, password_hash=get_password_hash("password123"))
    session.add(user)
    session.commit()
    session.refresh(user)
    if with_cart:
        session.add(Cart(user_id=user.id))
        session.commit()
    return user


def auth_headers(username: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(username)}"}


@pytest.fixture(name="bob")
def bob_fixture(session: Session) -> User:
    return make_user(session, "bob")
