from typing import Callable, List

import streamlit as st
from core.cart import CartStore
from flowbond.models import ItemSource, MenuItem


def _already_in_cart(store: CartStore, pass_id: str) -> bool:
    return any(
        i.pass_id == pass_id and i.source == ItemSource.REDEEMED for i in store.state.items
    )


def render_redeem_form(items: List[MenuItem], store: CartStore, t: Callable[..., str]):
    """Turn a pass into a free cart line for one of the venue's menu items."""
    if not items:
        return
    by_id = {item.id: item for item in items}
    with st.expander(t("redeem.title")):
        pass_id = st.text_input(t("redeem.passId"), key="redeem_pass_id").strip()
        menu_item_id = st.selectbox(
            t("redeem.menuItem"),
            list(by_id),
            format_func=lambda mid: by_id[mid].name,
            key="redeem_menu_item",
        )
        if st.button(t("redeem.submit"), key="redeem_submit", disabled=not pass_id):
            if _already_in_cart(store, pass_id):
                st.info(t("redeem.alreadyInCart"))
                return
            item = by_id[menu_item_id]
            store.redeem_pass(
                pass_id, item.id, item.name, image_url=item.image_url, item_type=item.type
            )
