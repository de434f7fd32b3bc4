"""Venue-scoped shopping cart.

The module-level functions are pure reducers: they take a :class:`CartState`
and return the next one, returning the very same object when nothing changes.
:class:`CartStore` holds the current state, writes it through a persistence
adapter after every change and notifies subscribed listeners.
"""
from __future__ import annotations

import uuid
from typing import Callable, List, Optional, Protocol

from flowbond.models import CartItem, CartState, ItemSource

IdFactory = Callable[[], str]
Listener = Callable[[CartState], None]


def _new_id() -> str:
    return str(uuid.uuid4())


def set_venue(state: CartState, venue_id: str, name: str, slug: str) -> CartState:
    if state.venue_id and state.venue_id != venue_id:
        return CartState(items=[], venue_id=venue_id, venue_name=name, venue_slug=slug)
    return state.model_copy(
        update={"venue_id": venue_id, "venue_name": name, "venue_slug": slug}
    )


def add_item(
    state: CartState,
    menu_item_id: str,
    name: str,
    price: int,
    quantity: int = 1,
    item_type: str = "OTHER",
    notes: Optional[str] = None,
    image_url: Optional[str] = None,
    new_id: IdFactory = _new_id,
) -> CartState:
    """Add a purchased line, merging into an existing one for the same menu item.

    A merge that leaves the line at zero or below removes it, and a new line
    with a non-positive quantity is ignored.
    """
    items = list(state.items)
    for idx, item in enumerate(items):
        if item.menu_item_id == menu_item_id and item.source == ItemSource.PURCHASED:
            merged = item.quantity + quantity
            if merged <= 0:
                return remove_item(state, item.id)
            items[idx] = item.model_copy(update={"quantity": merged})
            return state.model_copy(update={"items": items})
    if quantity <= 0:
        return state
    items.append(
        CartItem(
            id=new_id(),
            menu_item_id=menu_item_id,
            name=name,
            price=price,
            quantity=quantity,
            notes=notes,
            image_url=image_url,
            item_type=item_type,
            source=ItemSource.PURCHASED,
        )
    )
    return state.model_copy(update={"items": items})


def remove_item(state: CartState, item_id: str) -> CartState:
    items = [item for item in state.items if item.id != item_id]
    if len(items) == len(state.items):
        return state
    return state.model_copy(update={"items": items})


def update_quantity(state: CartState, item_id: str, quantity: int) -> CartState:
    if quantity <= 0:
        return remove_item(state, item_id)
    if not any(item.id == item_id for item in state.items):
        return state
    items = [
        item.model_copy(update={"quantity": quantity}) if item.id == item_id else item
        for item in state.items
    ]
    return state.model_copy(update={"items": items})


def redeem_pass(
    state: CartState,
    pass_id: str,
    menu_item_id: str,
    item_name: str,
    image_url: Optional[str] = None,
    item_type: str = "OTHER",
    new_id: IdFactory = _new_id,
) -> CartState:
    """Add a free line for ``pass_id`` unless that pass is already in the cart."""
    if any(i.pass_id == pass_id and i.source == ItemSource.REDEEMED for i in state.items):
        return state
    item = CartItem(
        id=new_id(),
        menu_item_id=menu_item_id,
        name=item_name,
        price=0,
        quantity=1,
        image_url=image_url,
        item_type=item_type,
        source=ItemSource.REDEEMED,
        pass_id=pass_id,
    )
    return state.model_copy(update={"items": [*state.items, item]})


def total(state: CartState) -> int:
    return sum(item.price * item.quantity for item in state.items)


def item_count(state: CartState) -> int:
    return sum(item.quantity for item in state.items)


class CartPersistenceAdapter(Protocol):
    def save(self, state: CartState) -> None: ...


class CartStore:
    """Mutable holder for the current :class:`CartState`."""

    def __init__(
        self,
        state: Optional[CartState] = None,
        persistence: Optional[CartPersistenceAdapter] = None,
        id_factory: IdFactory = _new_id,
    ) -> None:
        self._state = state if state is not None else CartState()
        self._persistence = persistence
        self._id_factory = id_factory
        self._listeners: List[Listener] = []

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def items(self) -> List[CartItem]:
        return list(self._state.items)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: CartState) -> CartState:
        if new_state is self._state or new_state == self._state:
            return self._state
        self._state = new_state
        if self._persistence is not None:
            self._persistence.save(new_state)
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def set_venue(self, venue_id: str, name: str, slug: str) -> CartState:
        return self._commit(set_venue(self._state, venue_id, name, slug))

    def add_item(
        self,
        menu_item_id: str,
        name: str,
        price: int,
        quantity: int = 1,
        item_type: str = "OTHER",
        notes: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> CartState:
        return self._commit(
            add_item(
                self._state,
                menu_item_id,
                name,
                price,
                quantity=quantity,
                item_type=item_type,
                notes=notes,
                image_url=image_url,
                new_id=self._id_factory,
            )
        )

    def remove_item(self, item_id: str) -> CartState:
        return self._commit(remove_item(self._state, item_id))

    def update_quantity(self, item_id: str, quantity: int) -> CartState:
        return self._commit(update_quantity(self._state, item_id, quantity))

    def redeem_pass(
        self,
        pass_id: str,
        menu_item_id: str,
        item_name: str,
        image_url: Optional[str] = None,
        item_type: str = "OTHER",
    ) -> CartState:
        return self._commit(
            redeem_pass(
                self._state,
                pass_id,
                menu_item_id,
                item_name,
                image_url=image_url,
                item_type=item_type,
                new_id=self._id_factory,
            )
        )

    def clear(self) -> CartState:
        return self._commit(CartState())

    def get_total(self) -> int:
        return total(self._state)

    def get_item_count(self) -> int:
        return item_count(self._state)
