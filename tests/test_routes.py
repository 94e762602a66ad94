def signup(client, email="a@x.com", username="alice", password="secret1"):
    return client.post("/signup", json={"email": email, "username": username, "password": password})


def test_liveness(client):
    res = client.get("/test")
    assert res.status_code == 200
    assert res.json()["success"] is True


def test_health_echoes_config(client):
    body = client.get("/health").json()
    assert body["success"] is True
    assert body["data"]["database"]["schema"] == "public"
    assert "corsOrigin" in body["data"]


def test_signup_then_login(client):
    res = signup(client)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"]["picture"]

    body = client.post("/login", json={"email": "a@x.com", "password": "secret1"}).json()
    assert body["success"] is True
    assert body["data"]["email"] == "a@x.com"
    assert body["data"]["username"] == "alice"
    assert body["data"]["profile"]["email"] == "a@x.com"


def test_signup_duplicate_email(client):
    signup(client)
    body = signup(client, username="alice2").json()
    assert body["success"] is False
    assert "exists" in body["message"]


def test_signup_short_password_creates_nothing(client, db):
    body = signup(client, password="123").json()
    assert body["success"] is False
    assert body["data"]["error"] == "validation"
    assert db.rows("accounts") == [] and db.rows("profile") == []


def test_signup_missing_field_uses_envelope(client):
    res = client.post("/signup", json={"email": "a@x.com"})
    assert res.status_code == 200
    assert res.json()["success"] is False


def test_signup_profile_failure_reports_outcome(client, db):
    db.fail("profile", "insert")
    body = signup(client).json()
    assert body["success"] is False
    assert body["data"]["outcome"] == "partial_failure_rolled_back"
    assert client.get("/checkEmail/a@x.com").json()["data"]["exists"] is False


def test_login_messages_are_identical(client):
    signup(client)
    wrong_password = client.post("/login", json={"email": "a@x.com", "password": "wrong-pass"}).json()
    unknown_email = client.post("/login", json={"email": "b@x.com", "password": "secret1"}).json()
    assert wrong_password["success"] is False
    assert wrong_password["message"] == unknown_email["message"]


def test_password_hash_never_leaves_the_api(client):
    signup(client)
    users = client.get("/users").json()["data"]["users"]
    assert users == [{"email": "a@x.com", "username": "alice", "createdAt": users[0]["createdAt"], "lastLogin": None}]
    login = client.post("/login", json={"email": "a@x.com", "password": "secret1"}).json()
    assert "passwordHash" not in str(login) and "password_hash" not in str(login)


def test_update_picture_then_fetch_profile(client):
    signup(client)
    body = client.put("/updateProfilePicture", json={
        "email": "a@x.com", "pictureUrl": "http://img/1", "unsplashImageId": "xyz",
    }).json()
    assert body["success"] is True

    profile = client.get("/userProfile/a@x.com").json()["data"]["profile"]
    assert profile["picture"] == "http://img/1"


def test_update_user_profile_partial(client):
    signup(client)
    client.put("/updateUserProfile", json={"email": "a@x.com", "bio": "hello"})
    body = client.put("/updateUserProfile", json={"email": "a@x.com", "phoneNumber": "555-0100"}).json()
    assert body["success"] is True
    assert body["data"]["profile"]["bio"] == "hello"
    assert body["data"]["profile"]["phoneNumber"] == "555-0100"


def test_missing_profile_is_not_found(client):
    body = client.get("/userProfile/nobody@x.com").json()
    assert body["success"] is False
    assert body["data"]["error"] == "not_found"


def test_all_user_data_and_check_profile(client):
    signup(client)
    signup(client, "b@x.com", "bob")
    assert client.get("/allUserData").json()["data"]["count"] == 2
    check = client.get("/checkUserProfile/b@x.com").json()["data"]
    assert check == {"exists": True, "count": 1}


def test_deleting_account_leaves_profile(client):
    """Accounts and profiles are deleted independently; nothing cascades."""
    signup(client)
    assert client.delete("/user/a@x.com").json()["success"] is True
    assert client.get("/checkEmail/a@x.com").json()["data"]["exists"] is False
    assert client.get("/checkUserProfile/a@x.com").json()["data"]["exists"] is True


def test_deleting_profile_leaves_account(client):
    signup(client)
    assert client.delete("/userProfile/a@x.com").json()["success"] is True
    assert client.get("/checkEmail/a@x.com").json()["data"]["exists"] is True
    login = client.post("/login", json={"email": "a@x.com", "password": "secret1"}).json()
    assert login["success"] is True
    assert login["data"]["profile"] == {}


def test_delete_unknown_user(client):
    assert client.delete("/user/nobody@x.com").json()["success"] is False


def test_random_picture_is_raw_json(client):
    body = client.get("/randomProfilePicture").json()
    assert "success" not in body
    assert body["seed"] in body["url"]


def test_picture_options(client):
    body = client.get("/profilePictureOptions/4").json()
    assert body["count"] == 4
    assert len(body["options"]) == 4


def test_store_outage_is_reported_in_envelope(client, db):
    db.fail("accounts", "select")
    body = client.get("/checkEmail/a@x.com").json()
    assert body["success"] is False
    assert body["data"]["error"] == "store"


def test_zero_picture_options(client):
    body = client.get("/profilePictureOptions/0").json()
    assert body["count"] == 0
    assert body["options"] == []
