from typing import Callable, List, Optional

import streamlit as st
from core.cart import CartStore
from flowbond.models import Venue


def render_venue_picker(
    venues: List[Venue], store: CartStore, t: Callable[..., str]
) -> Optional[Venue]:
    """Sidebar venue selector. Picking another venue empties the cart.

    When the cart belongs to a venue missing from ``venues`` nothing is
    preselected, so the cart survives until the user picks a venue.
    """
    st.sidebar.header(t("app.venue"))
    if not venues:
        st.sidebar.info(t("app.noVenues"))
        return None
    ids = [v.id for v in venues]
    by_id = {v.id: v for v in venues}
    current = store.state.venue_id
    if current in by_id:
        index = ids.index(current)
    elif current and store.items:
        st.sidebar.warning(t("app.venueUnavailable", venue=store.state.venue_name or current))
        index = None
    else:
        index = 0
    venue_id = st.sidebar.selectbox(
        t("app.selectVenue"),
        ids,
        index=index,
        format_func=lambda vid: by_id[vid].name,
        key="venue_select",
    )
    if venue_id is None:
        return None
    venue = by_id[venue_id]
    store.set_venue(venue.id, venue.name, venue.slug)
    if venue.address:
        st.sidebar.caption(venue.address)
    return venue
