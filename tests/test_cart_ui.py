from streamlit.testing.v1 import AppTest
from core.cart import CartStore


def cart_app():
    import streamlit as st
    from core.i18n import load_translations
    from ui.cart_drawer import render_cart_drawer

    t = load_translations().for_language(st.session_state.get("language", "en"))
    render_cart_drawer(st.session_state["cart_store"], t)


def _store():
    store = CartStore()
    store.set_venue("v1", "Bar One", "bar-one")
    store.add_item("m1", "Lager", 500, quantity=2)
    store.redeem_pass("p1", "m2", "Malbec")
    return store


def test_empty_cart_message():
    at = AppTest.from_function(cart_app)
    at.session_state["cart_store"] = CartStore()
    at.run()
    assert any(i.value == "Your cart is empty" for i in at.info)


def test_cart_lines_and_total():
    at = AppTest.from_function(cart_app)
    at.session_state["cart_store"] = _store()
    at.run()
    assert any(c.value == "Ordering from Bar One" for c in at.caption)
    assert at.metric[0].value == "$10.00"
    assert at.button(key="place_order").label == "Place Order - $10.00"


def test_quantity_buttons_update_store():
    store = _store()
    item_id = store.items[0].id
    at = AppTest.from_function(cart_app)
    at.session_state["cart_store"] = store
    at.run()
    at.button(key=f"inc_{item_id}").click().run()
    assert at.session_state["cart_store"].get_item_count() == 4
    at.button(key=f"dec_{item_id}").click().run()
    at.button(key=f"dec_{item_id}").click().run()
    at.button(key=f"dec_{item_id}").click().run()
    assert at.session_state["cart_store"].get_item_count() == 1
    assert at.metric[0].value == "$0.00"


def test_spanish_labels():
    at = AppTest.from_function(cart_app)
    at.session_state["language"] = "es"
    at.session_state["cart_store"] = _store()
    at.run()
    assert at.button(key="clear_cart").label == "Vaciar carrito"
    at.button(key="clear_cart").click().run()
    assert any(i.value == "Tu carrito está vacío" for i in at.info)


def test_checkout_without_venue_shows_error():
    store = CartStore()
    store.add_item("m1", "Lager", 500)
    at = AppTest.from_function(cart_app)
    at.session_state["cart_store"] = store
    at.run()
    at.button(key="place_order").click().run()
    assert at.error[0].value == "Failed to complete order. Please try again."
    assert at.session_state["cart_store"].get_item_count() == 1
