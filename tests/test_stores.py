from datetime import datetime, timezone

import pytest

from app.core.exceptions import ConflictError, StoreError
from app.core.security import hash_password
from app.modules.accounts.schemas import Account
from app.modules.profiles.schemas import Profile


def make_account(email="a@x.com", username="alice", **kwargs):
    return Account(
        email=email,
        username=username,
        password_hash=hash_password("secret1"),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        **kwargs,
    )


def test_account_insert_and_find(accounts):
    accounts.insert(make_account(picture="http://img/1"))
    found = accounts.find_by_email("a@x.com")
    assert found.username == "alice"
    assert found.auth_method == "local"
    assert found.email_verified is False
    assert found.last_login_at is None
    assert found.picture == "http://img/1"


def test_account_exists(accounts):
    accounts.insert(make_account())
    assert accounts.exists("a@x.com")
    assert accounts.exists_by_username("alice")
    assert not accounts.exists("A@x.com")
    assert not accounts.exists_by_username("bob")


def test_find_missing_account_returns_none(accounts):
    assert accounts.find_by_email("nobody@x.com") is None


def test_update_last_login(accounts):
    accounts.insert(make_account())
    when = datetime(2024, 2, 2, 12, 0, tzinfo=timezone.utc)
    accounts.update_last_login("a@x.com", when)
    assert accounts.find_by_email("a@x.com").last_login_at == when


def test_update_picture_returns_match_count(accounts):
    accounts.insert(make_account())
    assert accounts.update_picture("a@x.com", "http://img/2") == 1
    assert accounts.update_picture("nobody@x.com", "http://img/2") == 0
    assert accounts.find_by_email("a@x.com").picture == "http://img/2"


def test_delete_and_count(accounts):
    accounts.insert(make_account())
    assert accounts.count_by_email("a@x.com") == 1
    assert accounts.delete_by_email("a@x.com") == 1
    assert accounts.count_by_email("a@x.com") == 0
    assert accounts.delete_by_email("a@x.com") == 0


def test_list_all_is_projection(accounts):
    accounts.insert(make_account())
    accounts.insert(make_account("b@x.com", "bob"))
    users = accounts.list_all()
    assert {u.email for u in users} == {"a@x.com", "b@x.com"}
    dumped = users[0].model_dump(by_alias=True)
    assert set(dumped) == {"email", "username", "createdAt", "lastLogin"}


def test_unique_violation_maps_to_conflict(accounts):
    accounts.insert(make_account())
    with pytest.raises(ConflictError, match="email exists"):
        accounts.insert(make_account(username="other"))
    with pytest.raises(ConflictError, match="username exists"):
        accounts.insert(make_account(email="b@x.com"))


def test_database_failure_maps_to_store_error(db, accounts):
    db.fail("accounts", "select")
    with pytest.raises(StoreError):
        accounts.exists("a@x.com")
    db.fail("accounts", "insert")
    with pytest.raises(StoreError):
        accounts.insert(make_account())


def test_profile_roundtrip(profiles):
    profiles.insert(Profile(email="a@x.com", username="alice", picture="http://img/1"))
    assert profiles.exists("a@x.com")
    profile = profiles.find_by_email("a@x.com")
    assert profile.bio is None and profile.location is None and profile.phone_number is None
    assert profiles.count_by_email("a@x.com") == 1


def test_profile_update_fields_leaves_others(profiles):
    profiles.insert(Profile(email="a@x.com", username="alice", bio="hi", location="Oslo"))
    updated = profiles.update_fields("a@x.com", {"bio": "hello"})
    assert updated.bio == "hello"
    assert updated.location == "Oslo"
    assert updated.picture is None


def test_profile_update_missing_returns_none(profiles):
    assert profiles.update_fields("nobody@x.com", {"bio": "x"}) is None


def test_profile_delete_and_list(profiles):
    profiles.insert(Profile(email="a@x.com", username="alice"))
    profiles.insert(Profile(email="b@x.com", username="bob"))
    assert len(profiles.list_all()) == 2
    assert profiles.delete_by_email("a@x.com") == 1
    assert [p.email for p in profiles.list_all()] == ["b@x.com"]


def test_profile_duplicate_is_conflict(profiles):
    profiles.insert(Profile(email="a@x.com", username="alice"))
    with pytest.raises(ConflictError):
        profiles.insert(Profile(email="a@x.com", username="alice"))
