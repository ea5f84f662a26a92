import pytest

from browser_shell import BrowserModel
from browser_shell.errors import NoCurrentLocation, UnknownFavorite
from browser_shell.types import Location

loc = Location.parse


def visit(model: BrowserModel, *urls: str) -> None:
    for url in urls:
        model.go(loc(url))


@pytest.mark.parametrize("count", [1, 2, 3, 5])
def test_has_previous_after_n_visits(model, count):
    urls = [f"http://site{i}.com" for i in range(count)]

    visit(model, *urls)

    assert model.has_previous() == (count >= 2)
    assert model.current() == loc(urls[-1])


def test_back_then_next_restores_location(model):
    visit(model, "http://a.com", "http://b.com", "http://c.com")
    before = model.current()

    model.back()
    assert model.next() == before
    assert model.current() == before


def test_go_after_back_discards_forward_history(model):
    visit(model, "http://a.com", "http://b.com", "http://c.com")
    model.back()
    model.back()

    model.go(loc("http://d.com"))

    assert not model.has_next()
    assert model.next() is None


def test_browsing_scenario(model):
    visit(model, "http://a.com", "http://b.com")

    assert model.back() == loc("http://a.com")
    assert model.has_next()
    assert model.next() == loc("http://b.com")

    model.go(loc("http://c.com"))

    assert not model.has_next()
    assert model.history.entries() == [
        loc("http://a.com"), loc("http://b.com"), loc("http://c.com"),
    ]


def test_empty_model_traversal_returns_none(model):
    assert model.back() is None
    assert model.next() is None
    assert not model.has_previous()
    assert not model.has_next()
    assert model.current() is None


def test_back_at_first_entry_returns_none_and_keeps_position(model):
    visit(model, "http://a.com")

    assert model.back() is None
    assert model.current() == loc("http://a.com")


def test_favorite_keeps_location_from_when_it_was_added(model):
    visit(model, "http://a.com")
    model.add_favorite("x")
    visit(model, "http://b.com", "http://c.com")

    assert model.get_favorite("x") == loc("http://a.com")


def test_add_favorite_before_navigation_fails(model):
    with pytest.raises(NoCurrentLocation):
        model.add_favorite("news")
    assert model.favorite_names() == []


@pytest.mark.parametrize("name", ["", "   "])
def test_add_favorite_rejects_blank_names(model, name):
    visit(model, "http://a.com")

    with pytest.raises(ValueError):
        model.add_favorite(name)


def test_re_adding_favorite_overwrites_and_keeps_order(model):
    visit(model, "http://a.com")
    model.add_favorite("first")
    model.add_favorite("second")
    visit(model, "http://b.com")
    model.add_favorite("first")

    assert model.get_favorite("first") == loc("http://b.com")
    assert model.favorite_names() == ["first", "second"]


def test_unknown_favorite(model):
    with pytest.raises(UnknownFavorite) as excinfo:
        model.get_favorite("missing")
    assert "missing" in str(excinfo.value)


def test_home_is_fixed_when_set(model):
    assert model.get_home() is None
    visit(model, "http://a.com")
    model.set_home()
    visit(model, "http://b.com")
    model.back()
    model.next()

    assert model.get_home() == loc("http://a.com")


def test_set_home_before_navigation_fails(model):
    with pytest.raises(NoCurrentLocation):
        model.set_home()
    assert model.get_home() is None
