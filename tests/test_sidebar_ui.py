from streamlit.testing.v1 import AppTest
from core.cart import CartStore
from flowbond.models import Venue

VENUES = [
    Venue(id="v1", name="Bar One", slug="bar-one", address="1 Main St"),
    Venue(id="v2", name="Bar Two", slug="bar-two"),
]


def sidebar_app():
    import streamlit as st
    from core.i18n import load_translations
    from ui.sidebar import render_venue_picker

    t = load_translations().for_language("en")
    venue = render_venue_picker(st.session_state["venues"], st.session_state["cart_store"], t)
    st.session_state["picked"] = venue.id if venue else None


def _app(store):
    at = AppTest.from_function(sidebar_app)
    at.session_state["venues"] = VENUES
    at.session_state["cart_store"] = store
    return at


def test_known_venue_is_preselected():
    store = CartStore()
    store.set_venue("v2", "Bar Two", "bar-two")
    store.add_item("m1", "Lager", 500)
    at = _app(store)
    at.run()
    assert at.session_state["picked"] == "v2"
    assert len(store.items) == 1


def test_fresh_cart_adopts_first_venue():
    store = CartStore()
    at = _app(store)
    at.run()
    assert at.session_state["picked"] == "v1"
    assert store.state.venue_id == "v1"


def test_missing_venue_keeps_cart_until_user_picks():
    store = CartStore()
    store.set_venue("gone", "Old Bar", "old-bar")
    store.add_item("m1", "Lager", 500, quantity=2)
    at = _app(store)
    at.run()
    assert at.session_state["picked"] is None
    assert any("Old Bar is no longer available" in w.value for w in at.sidebar.warning)
    assert store.state.venue_id == "gone"
    assert store.get_item_count() == 2

    at.selectbox(key="venue_select").select("v2").run()
    assert at.session_state["picked"] == "v2"
    assert store.state.venue_id == "v2"
    assert store.items == []
