"""Submit the cart to the API as an order."""
from __future__ import annotations

import logging

from core.api import ApiError, FlowBondClient
from core.cart import CartStore
from flowbond.models import ItemSource, Order

logger = logging.getLogger(__name__)


class CheckoutError(Exception):
    """The cart cannot be submitted in its current state."""


def submit_cart(store: CartStore, client: FlowBondClient) -> Order:
    """Create a draft order from the cart, check it out and clear the cart.

    The cart is left untouched when any API call fails.
    """
    state = store.state
    if not state.venue_id:
        raise CheckoutError("No venue selected")
    if not state.items:
        raise CheckoutError("Cart is empty")

    try:
        order = client.create_order(state.venue_id)
        for item in state.items:
            if item.source == ItemSource.PURCHASED:
                client.add_order_item(order.id, item.menu_item_id, item.quantity, item.notes)
            elif item.pass_id:
                client.redeem_order_pass(order.id, item.pass_id)
        order = client.checkout_order(order.id)
    except ApiError as exc:
        logger.error("Checkout failed for venue %s: %s", state.venue_id, exc)
        raise

    logger.info("Order %s placed at %s", order.order_number, state.venue_name)
    store.clear()
    return order
