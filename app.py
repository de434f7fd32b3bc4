import streamlit as st

from core.api import ApiError, FlowBondClient, NotFoundError
from core.i18n import load_translations
from core.logger import init_log
from core.state import load_state, save_state
from ui.cart_drawer import render_cart_drawer
from ui.menu import render_menu
from ui.order import render_order
from ui.redeem import render_redeem_form
from ui.sidebar import render_venue_picker
from ui.topbar import render_topbar

logger = init_log("flowbond")


@st.cache_resource
def get_translations():
    return load_translations()


@st.cache_data(ttl=60)
def fetch_venues():
    with FlowBondClient() as client:
        return client.list_venues()


@st.cache_data(ttl=60)
def fetch_menu(venue_id: str):
    with FlowBondClient() as client:
        return client.get_public_menu(venue_id)


def _dismiss_order():
    st.session_state.pop("last_order", None)


def main():
    st.set_page_config(page_title="FlowBond", layout="wide")
    load_state()
    store = st.session_state["cart_store"]
    translations = get_translations()

    language = render_topbar(translations, store)
    t = translations.for_language(language)
    save_state()

    order = st.session_state.get("last_order")
    if order is not None:
        render_order(order, t)
        st.button(t("common.done"), key="dismiss_order", on_click=_dismiss_order)
        return

    try:
        venues = fetch_venues()
    except ApiError as exc:
        logger.error("Could not load venues: %s", exc)
        st.sidebar.error(t("errors.networkError"))
        venues = []
    venue = render_venue_picker(venues, store, t)

    menu_col, cart_col = st.columns([2, 1])
    with menu_col:
        if venue is not None:
            try:
                categories = fetch_menu(venue.id)
            except NotFoundError:
                st.warning(t("errors.notFound"))
                categories = []
            except ApiError as exc:
                logger.error("Could not load menu for %s: %s", venue.slug, exc)
                st.error(t("errors.serverError"))
                categories = []
            render_menu(categories, store, t)
            render_redeem_form(
                [item for c in categories for item in c.items if item.is_available],
                store,
                t,
            )
    with cart_col:
        render_cart_drawer(store, t)


if __name__ == "__main__":
    main()
