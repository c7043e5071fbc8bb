import itertools
import pytest
from flask_jwt_extended import create_access_token
from flatshare import create_app
from flatshare.extension import db
from flatshare.models import User, Group
from flatshare.service import chat_broadcast
from flatshare.utils.roles import PERMISSION_ADMIN, PERMISSION_MEMBER

PASSWORD = "Secret1!"

_counter = itertools.count(1)


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def clear_listeners():
    yield
    chat_broadcast._listeners.clear()


@pytest.fixture
def make_user(app):
    def _make_user(username=None, email=None, group=None, permission=None, password=PASSWORD):
        n = next(_counter)
        user = User(
            username=username or f"user{n}",
            email=email or f"user{n}@example.com",
        )
        user.set_password(password)
        if group is not None:
            user.group = group
            user.permission = permission or PERMISSION_MEMBER
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_group(app, make_user):
    """Group with an admin founder followed by `size - 1` plain members."""
    def _make_group(size=2, name="Flat"):
        group = Group(name=name, join_code=f"{next(_counter):06X}")
        db.session.add(group)
        db.session.commit()
        members = [make_user(group=group, permission=PERMISSION_ADMIN)]
        members += [make_user(group=group) for _ in range(size - 1)]
        return group, members
    return _make_group


@pytest.fixture
def auth_headers(app):
    def _auth_headers(user):
        token = create_access_token(identity=str(user.id))
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
