from typing import Callable, List

import streamlit as st
from core.cart import CartStore
from core.utils import format_price
from flowbond.models import MenuCategory, MenuItem


def _add(store: CartStore, item: MenuItem) -> None:
    store.add_item(
        item.id,
        item.name,
        item.price,
        quantity=1,
        item_type=item.type,
        image_url=item.image_url,
    )


def render_menu(categories: List[MenuCategory], store: CartStore, t: Callable[..., str]):
    """Render the public menu with one add button per item."""
    st.header(t("menu.title"))
    if not any(c.items for c in categories):
        st.info(t("menu.empty"))
        return
    for category in categories:
        if not category.items:
            continue
        st.subheader(category.name)
        if category.description:
            st.caption(category.description)
        for item in category.items:
            c1, c2, c3 = st.columns([3, 1, 1])
            c1.markdown(f"**{item.name}**")
            if item.description:
                c1.caption(item.description)
            c2.write(format_price(item.price))
            if item.is_available:
                c3.button(
                    t("menu.addToCart"),
                    key=f"add_{item.id}",
                    on_click=_add,
                    args=(store, item),
                )
            else:
                c3.caption(t("menu.unavailable"))
