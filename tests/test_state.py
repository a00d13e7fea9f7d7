from __future__ import annotations

from conftest import make_item

from cookie_kingdom.models import Theme
from cookie_kingdom.state import (
    CatalogSession,
    add_to_cart,
    filter_catalog,
    post_review,
    select,
    toggle_theme,
)


def test_filter_is_case_insensitive_and_keeps_catalog_order():
    catalog = (make_item("Oat Bar"), make_item("Chocolate"), make_item("Goat Cheese Crisp"))

    result = filter_catalog(catalog, "OAT")

    assert [item.name for item in result] == ["Oat Bar", "Goat Cheese Crisp"]
    omitted = [item for item in catalog if item not in result]
    assert all("oat" not in item.name.lower() for item in omitted)


def test_empty_search_returns_full_catalog():
    catalog = (make_item("A"), make_item("B"))

    assert filter_catalog(catalog, "") == catalog


def test_unmatched_search_returns_empty_sequence():
    assert filter_catalog((make_item("A"),), "zzz") == ()
    assert filter_catalog((), "a") == ()


def test_select_out_of_range_is_none():
    filtered = (make_item("A"),)

    assert select(filtered, 0) is filtered[0]
    assert select(filtered, 1) is None
    assert select(filtered, -1) is None
    assert select((), 0) is None


def test_add_to_cart_is_idempotent():
    once = add_to_cart((), "X")

    assert add_to_cart(once, "X") == once == ("X",)


def test_add_to_cart_preserves_insertion_order():
    assert add_to_cart(add_to_cart((), "A"), "B") == ("A", "B")
    assert add_to_cart(add_to_cart((), "B"), "A") == ("B", "A")


def test_post_review_ignores_blank_text():
    item = make_item("A", reviews=["Great!"])

    assert post_review(item, "   ") is False
    assert item.reviews == ["Great!"]


def test_post_review_appends_untrimmed_text():
    item = make_item("A", reviews=["Great!"])

    assert post_review(item, "  Also good ") is True
    assert item.reviews == ["Great!", "  Also good "]


def test_toggle_theme_flips():
    assert toggle_theme(Theme.DARK) is Theme.LIGHT
    assert toggle_theme(Theme.LIGHT) is Theme.DARK


def test_session_defaults(session):
    assert session.search_text == ""
    assert session.selected_index == 0
    assert session.cart == ()
    assert session.theme is Theme.DARK
    assert session.draft_review == ""
    assert session.selected_item is session.catalog[0]


def test_selection_is_invalidated_by_new_search():
    a, b = make_item("A"), make_item("B")
    session = CatalogSession((a, b))

    assert session.select(1)
    assert session.selected_item is b

    session.set_search_text("A")

    assert [item.name for item in session.filtered] == ["A"]
    assert session.selected_index == 1
    assert session.selected_item is None


def test_selection_comes_back_when_search_is_cleared():
    a, b = make_item("A"), make_item("B")
    session = CatalogSession((a, b))
    session.select(1)
    session.set_search_text("A")

    session.set_search_text("")

    assert session.selected_item is b


def test_select_rejects_index_outside_filtered_view(session):
    session.set_search_text("oat")

    assert session.select(1) is False
    assert session.selected_index == 0


def test_move_selection_cycles_and_recovers_from_invalid_selection():
    session = CatalogSession((make_item("A"), make_item("B"), make_item("C")))

    session.move_selection(-1)
    assert session.selected_item.name == "C"
    session.move_selection(1)
    assert session.selected_item.name == "A"

    session.select(2)
    session.set_search_text("b")
    assert session.selected_item is None
    assert session.move_selection(1)
    assert session.selected_item.name == "B"


def test_move_selection_on_empty_view_is_noop(session):
    session.set_search_text("no such cookie")

    assert session.move_selection(1) is False
    assert session.selected_index == 0


def test_session_cart_reports_whether_it_changed(session):
    assert session.add_to_cart("Chocolate Chip Cookies") is True
    assert session.add_to_cart("Chocolate Chip Cookies") is False
    assert session.cart == ("Chocolate Chip Cookies",)


def test_add_selected_to_cart_without_selection(session):
    session.set_search_text("no such cookie")

    assert session.add_selected_to_cart() is False
    assert session.cart == ()


def test_blank_post_keeps_draft_and_reviews(session):
    item = session.selected_item
    before = list(item.reviews)
    session.set_draft_review("   ")

    assert session.post_review() is False
    assert session.draft_review == "   "
    assert item.reviews == before


def test_post_review_appends_and_clears_draft():
    item = make_item("A", reviews=["Great!"])
    session = CatalogSession((item,))
    session.set_draft_review("Also good")

    assert session.post_review() is True
    assert item.reviews == ["Great!", "Also good"]
    assert session.draft_review == ""


def test_post_review_without_selection_keeps_draft():
    a, b = make_item("A"), make_item("B")
    session = CatalogSession((a, b))
    session.select(1)
    session.set_search_text("A")
    session.set_draft_review("Lovely")

    assert session.post_review() is False
    assert a.reviews == []
    assert b.reviews == []
    assert session.draft_review == "Lovely"


def test_post_review_targets_item_selected_in_filtered_view():
    a, b = make_item("Apple"), make_item("Banana")
    session = CatalogSession((a, b))
    session.set_search_text("ban")
    session.select(0)
    session.set_draft_review("Nice")

    session.post_review()

    assert b.reviews == ["Nice"]
    assert a.reviews == []


def test_session_toggle_theme(session):
    assert session.toggle_theme() is Theme.LIGHT
    assert session.toggle_theme() is Theme.DARK


def test_checkout_is_a_stub(session):
    session.add_to_cart("Oatmeal Raisin Cookies")

    assert session.checkout() == ("Oatmeal Raisin Cookies",)
    assert session.cart == ("Oatmeal Raisin Cookies",)


def test_browse_filter_cart_and_review(session):
    session.set_search_text("oat")
    assert [item.name for item in session.filtered] == ["Oatmeal Raisin Cookies"]

    session.select(0)
    selected = session.selected_item
    assert selected.rating == 4.6

    session.add_to_cart(selected.name)
    assert session.cart == ("Oatmeal Raisin Cookies",)

    count = len(selected.reviews)
    session.set_draft_review("Yum")
    session.post_review()
    assert len(selected.reviews) == count + 1
    assert selected.reviews[-1] == "Yum"
