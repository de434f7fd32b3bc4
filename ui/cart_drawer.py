"""Cart drawer: line items, quantity controls and order submission."""
from __future__ import annotations

import logging
from typing import Callable, List

import pandas as pd
import streamlit as st

from core.api import ApiError, FlowBondClient
from core.cart import CartStore
from core.checkout import CheckoutError, submit_cart
from core.utils import format_price
from flowbond.models import CartItem, ItemSource

logger = logging.getLogger(__name__)


def cart_frame(items: List[CartItem], t: Callable[..., str]) -> pd.DataFrame:
    """Tabular view of the cart lines with formatted prices."""
    rows = []
    for item in items:
        redeemed = item.source == ItemSource.REDEEMED
        rows.append(
            {
                t("cart.item"): item.name,
                t("cart.quantity"): item.quantity,
                t("cart.price"): t("cart.redeemed") if redeemed else format_price(item.price),
                t("cart.lineTotal"): format_price(item.line_total),
            }
        )
    columns = [t("cart.item"), t("cart.quantity"), t("cart.price"), t("cart.lineTotal")]
    return pd.DataFrame(rows, columns=columns)


def _place_order(store: CartStore, client_factory: Callable[[], FlowBondClient]) -> None:
    try:
        with client_factory() as client:
            st.session_state["last_order"] = submit_cart(store, client)
        st.session_state.pop("checkout_error", None)
    except (CheckoutError, ApiError) as exc:
        logger.warning("Order not placed: %s", exc)
        st.session_state["checkout_error"] = str(exc)


def render_cart_drawer(
    store: CartStore,
    t: Callable[..., str],
    client_factory: Callable[[], FlowBondClient] = FlowBondClient,
):
    st.header(t("cart.title"))
    state = store.state
    if state.venue_name:
        st.caption(t("cart.orderingFrom", venue=state.venue_name))
    if st.session_state.get("checkout_error"):
        st.error(t("cart.checkoutFailed"))

    if not state.items:
        st.info(t("cart.empty"))
        st.caption(t("cart.emptyHint"))
        return

    st.dataframe(cart_frame(state.items, t), hide_index=True)

    for item in state.items:
        cols = st.columns([3, 1, 1, 1])
        cols[0].write(item.name)
        if item.source == ItemSource.PURCHASED:
            cols[1].button(
                "−",
                key=f"dec_{item.id}",
                on_click=store.update_quantity,
                args=(item.id, item.quantity - 1),
            )
            cols[2].button(
                "+",
                key=f"inc_{item.id}",
                on_click=store.update_quantity,
                args=(item.id, item.quantity + 1),
            )
        else:
            cols[1].caption(t("cart.redeemed"))
        cols[3].button(
            t("cart.remove"),
            key=f"remove_{item.id}",
            on_click=store.remove_item,
            args=(item.id,),
        )

    total = format_price(store.get_total())
    st.metric(t("cart.subtotal"), total)
    st.button(
        t("cart.placeOrder", total=total),
        key="place_order",
        type="primary",
        on_click=_place_order,
        args=(store, client_factory),
    )
    st.button(t("cart.clear"), key="clear_cart", on_click=store.clear)
