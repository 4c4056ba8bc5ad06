import pytest

from models import PlayerOrder, Race
from services.player_query_service import (
    PlayerFilter,
    find_players,
    count_players,
    page_to_offset
)
from tests.conftest import birthday


@pytest.fixture
def roster(make_player):
    return {
        "alice": make_player(name="Alice", title="Dragon Slayer", race="ELF",
                             profession="WARRIOR", experience=100, birthday=birthday(2005)),
        "bob": make_player(name="bob", title="Night Watch", race="HUMAN",
                           profession="ROGUE", experience=1000, birthday=birthday(2010), banned=True),
        "carol": make_player(name="Carol", title="dragon rider", race="ELF",
                             profession="SORCERER", experience=0, birthday=birthday(2015)),
        "alx": make_player(name="al_x", title="100% Pure", race="DWARF",
                           profession="CLERIC", experience=300, birthday=birthday(2020)),
    }


def _names(players):
    return [player.name for player in players]


def _find(db, filters=None, order=None, offset=0, limit=100):
    return find_players(db, filters or PlayerFilter(), order, offset, limit)


def test_no_filters_match_everything_in_id_order(db, roster):
    assert _names(_find(db)) == ["Alice", "bob", "Carol", "al_x"]
    assert count_players(db, PlayerFilter()) == 4


def test_name_is_case_insensitive_substring(db, roster):
    assert _names(_find(db, PlayerFilter(name="AL"))) == ["Alice", "al_x"]


def test_like_wildcards_are_matched_literally(db, roster):
    assert _names(_find(db, PlayerFilter(name="l_"))) == ["al_x"]
    assert _names(_find(db, PlayerFilter(title="%"))) == ["al_x"]


def test_title_filter(db, roster):
    assert _names(_find(db, PlayerFilter(title="DRAGON"))) == ["Alice", "Carol"]


def test_exact_filters(db, roster):
    assert _names(_find(db, PlayerFilter(race=Race.ELF))) == ["Alice", "Carol"]
    assert _names(_find(db, PlayerFilter(banned=True))) == ["bob"]
    assert count_players(db, PlayerFilter(banned=False)) == 3


def test_numeric_ranges_are_inclusive(db, roster):
    assert _names(_find(db, PlayerFilter(min_experience=100, max_experience=300))) == ["Alice", "al_x"]
    assert _names(_find(db, PlayerFilter(min_level=1, max_level=2))) == ["Alice", "al_x"]


def test_birthday_range_is_inclusive(db, roster):
    filters = PlayerFilter(after=birthday(2010), before=birthday(2015))
    assert _names(_find(db, filters)) == ["bob", "Carol"]


def test_filters_combine(db, roster):
    filters = PlayerFilter(race=Race.ELF, min_level=1)
    assert _names(_find(db, filters)) == ["Alice"]


@pytest.mark.parametrize(
    "order, expected",
    [
        (PlayerOrder.ID_DESC, ["al_x", "Carol", "bob", "Alice"]),
        (PlayerOrder.EXPERIENCE, ["Carol", "Alice", "al_x", "bob"]),
        (PlayerOrder.EXPERIENCE_DESC, ["bob", "al_x", "Alice", "Carol"]),
        (PlayerOrder.LEVEL, ["Carol", "Alice", "al_x", "bob"]),
        (PlayerOrder.BIRTHDAY_DESC, ["al_x", "Carol", "bob", "Alice"]),
    ],
)
def test_order(db, roster, order, expected):
    assert _names(_find(db, order=order)) == expected


def test_order_ties_fall_back_to_id(db, make_player):
    make_player(name="Same", experience=50)
    make_player(name="Same", experience=10)
    players = _find(db, order=PlayerOrder.NAME)
    assert [player.experience for player in players] == [50, 10]


def test_pagination_after_sorting(db, roster):
    assert page_to_offset(1, 3) == 3
    page = _find(db, order=PlayerOrder.EXPERIENCE, offset=page_to_offset(1, 3), limit=3)
    assert _names(page) == ["bob"]
    assert _find(db, offset=page_to_offset(5, 10), limit=10) == []


def test_count_without_match_is_zero(db, roster):
    count = count_players(db, PlayerFilter(name="nobody"))
    assert count == 0
    assert isinstance(count, int)
