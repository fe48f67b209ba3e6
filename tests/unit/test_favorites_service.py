"""
Unit tests for the favorites store
"""
import pytest
from sqlalchemy import delete, func, select

from kidmap.core.exceptions import NotFoundError, ValidationError
from kidmap.models.favorite import Favorite
from kidmap.models.user import User
from kidmap.schemas.favorite import FavoriteCreate
from kidmap.services.favorites_service import FavoritesService


def _snapshot(place_id="101", name="Liberty Park Playground", place_type="playground"):
    return FavoriteCreate(
        place_id=place_id,
        place_name=name,
        place_type=place_type,
        place_lat="40.74",
        place_lon="-74.05",
        place_address="12 Grand Street Jersey City",
    )


def _row_count(db_session, user_id):
    stmt = select(func.count()).select_from(Favorite).where(Favorite.user_id == user_id)
    return db_session.execute(stmt).scalar_one()


def test_add_favorite(db_session, test_user):
    service = FavoritesService(db_session)

    favorite, created = service.add_favorite(test_user.id, _snapshot())

    assert created is True
    assert favorite.id is not None
    assert favorite.user_id == test_user.id
    assert favorite.place_id == "101"
    assert favorite.place_name == "Liberty Park Playground"
    assert favorite.visited is False
    assert favorite.visited_at is None
    assert favorite.created_at is not None


def test_duplicate_add_keeps_first_snapshot(db_session, test_user):
    service = FavoritesService(db_session)
    first, _ = service.add_favorite(test_user.id, _snapshot(name="Original Name"))

    second, created = service.add_favorite(test_user.id, _snapshot(name="Renamed Later"))

    assert created is False
    assert second.id == first.id
    assert second.place_name == "Original Name"
    assert _row_count(db_session, test_user.id) == 1


def test_unknown_place_type_is_rejected(db_session, test_user):
    service = FavoritesService(db_session)

    with pytest.raises(ValidationError):
        service.add_favorite(test_user.id, _snapshot(place_type="restaurant"))

    assert _row_count(db_session, test_user.id) == 0


def test_remove_favorite(db_session, test_user):
    service = FavoritesService(db_session)
    service.add_favorite(test_user.id, _snapshot())

    service.remove_favorite(test_user.id, "101")

    assert not service.is_favorite(test_user.id, "101")
    assert _row_count(db_session, test_user.id) == 0


def test_remove_missing_favorite_is_not_an_error(db_session, test_user):
    FavoritesService(db_session).remove_favorite(test_user.id, "does-not-exist")


def test_favorites_are_scoped_per_user(db_session, test_user, other_user):
    service = FavoritesService(db_session)
    service.add_favorite(test_user.id, _snapshot("101"))
    service.add_favorite(test_user.id, _snapshot("202", name="Hamilton Park", place_type="park"))
    service.add_favorite(other_user.id, _snapshot("303", name="Pier A Park", place_type="park"))

    mine = service.list_favorites(test_user.id)

    assert {f.place_id for f in mine} == {"101", "202"}
    assert service.is_favorite(other_user.id, "303")
    assert not service.is_favorite(test_user.id, "303")

    # removing through another user's id leaves the row alone
    service.remove_favorite(other_user.id, "101")
    assert service.is_favorite(test_user.id, "101")


def test_same_place_for_two_users(db_session, test_user, other_user):
    service = FavoritesService(db_session)

    _, created_a = service.add_favorite(test_user.id, _snapshot())
    _, created_b = service.add_favorite(other_user.id, _snapshot())

    assert created_a and created_b


def test_toggle_visited_round_trip(db_session, test_user):
    service = FavoritesService(db_session)
    service.add_favorite(test_user.id, _snapshot())

    visited = service.toggle_visited(test_user.id, "101")
    assert visited.visited is True
    assert visited.visited_at is not None

    unvisited = service.toggle_visited(test_user.id, "101")
    assert unvisited.visited is False
    assert unvisited.visited_at is None


def test_toggle_visited_missing_raises_and_writes_nothing(db_session, test_user):
    service = FavoritesService(db_session)

    with pytest.raises(NotFoundError):
        service.toggle_visited(test_user.id, "404")

    assert _row_count(db_session, test_user.id) == 0


def test_toggle_visited_cannot_reach_other_users_rows(db_session, test_user, other_user):
    service = FavoritesService(db_session)
    service.add_favorite(other_user.id, _snapshot())

    with pytest.raises(NotFoundError):
        service.toggle_visited(test_user.id, "101")

    assert service.get_favorite(other_user.id, "101").visited is False


def test_deleting_user_cascades_to_favorites(db_session, test_user):
    service = FavoritesService(db_session)
    service.add_favorite(test_user.id, _snapshot())

    db_session.execute(delete(User).where(User.id == test_user.id))
    db_session.commit()

    assert _row_count(db_session, test_user.id) == 0
