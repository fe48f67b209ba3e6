"""
Unit tests for the user upsert contract
"""
from kidmap.schemas.user import UserUpsert
from kidmap.services.user_service import UserService, user_from_claims


def test_upsert_creates_user(db_session):
    service = UserService(db_session)

    user = service.upsert_user(UserUpsert(id="new-user", email="new@example.com", first_name="Sam"))

    assert user.id == "new-user"
    assert user.email == "new@example.com"
    assert user.first_name == "Sam"
    assert user.last_name is None
    assert user.created_at is not None
    assert user.updated_at is not None


def test_upsert_overwrites_profile_fields(db_session, test_user):
    service = UserService(db_session)

    user = service.upsert_user(UserUpsert(
        id=test_user.id,
        email="pat.lee@example.com",
        first_name="Patricia",
        profile_image_url="https://img.example.com/pat.png",
    ))

    assert user.id == test_user.id
    assert user.email == "pat.lee@example.com"
    assert user.first_name == "Patricia"
    # fields absent from the provider payload are overwritten too
    assert user.last_name is None
    assert user.profile_image_url == "https://img.example.com/pat.png"
    assert user.updated_at is not None


def test_upsert_is_idempotent(db_session):
    service = UserService(db_session)
    payload = UserUpsert(id="repeat", email="repeat@example.com")

    service.upsert_user(payload)
    service.upsert_user(payload)

    assert service.get_user("repeat").email == "repeat@example.com"


def test_get_missing_user(db_session):
    assert UserService(db_session).get_user("nobody") is None


def test_user_from_claims():
    upsert = user_from_claims({
        "sub": 42,
        "email": "kid@example.com",
        "first_name": "Alex",
        "exp": 123,
    })

    assert upsert.id == "42"
    assert upsert.email == "kid@example.com"
    assert upsert.first_name == "Alex"
    assert upsert.profile_image_url is None


def test_ensure_user_creates_missing_row(db_session):
    service = UserService(db_session)

    user = service.ensure_user({"sub": "first-visit", "email": "first@example.com"})

    assert user.id == "first-visit"
    assert service.get_user("first-visit").email == "first@example.com"


def test_ensure_user_leaves_existing_row_alone(db_session, test_user):
    user = UserService(db_session).ensure_user({"sub": test_user.id, "first_name": "Someone Else"})

    assert user.first_name == "Pat"
    assert user.email == "parent@example.com"
