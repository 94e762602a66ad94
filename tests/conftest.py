import pytest
from fastapi.testclient import TestClient

from app.database.supabase_client import get_supabase
from app.main import app
from app.modules.accounts.store import AccountStore
from app.modules.auth.service import AuthService, RegistrationService
from app.modules.pictures.provider import get_picture_provider
from app.modules.profiles.store import ProfileStore

from tests.fakes import FakeSupabase, make_provider, picsum_handler


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def accounts(db):
    return AccountStore(db)


@pytest.fixture
def profiles(db):
    return ProfileStore(db)


@pytest.fixture
def pictures():
    return make_provider(picsum_handler)


@pytest.fixture
def registration(accounts, profiles, pictures):
    return RegistrationService(accounts, profiles, pictures)


@pytest.fixture
def auth(accounts, profiles):
    return AuthService(accounts, profiles)


@pytest.fixture
def client(db, pictures):
    app.dependency_overrides[get_supabase] = lambda: db
    app.dependency_overrides[get_picture_provider] = lambda: pictures
    yield TestClient(app)
    app.dependency_overrides.clear()
