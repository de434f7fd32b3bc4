import json
import logging
import os
from typing import Any, Dict, Optional

import streamlit as st
from pydantic import ValidationError

from core.cart import CartStore
from core.config import config
from core.i18n import language_or_default
from flowbond.models import CartState

logger = logging.getLogger(__name__)

CART_KEY = "flowbond-cart"
LANGUAGE_KEY = "flowbond-language"


class LocalStorage:
    """Key/value JSON file standing in for browser local storage."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or config.session_file

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: not a JSON object", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        # the previous file stays intact until os.replace
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, self.path)

    def get_item(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set_item(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class CartPersistence:
    """Mirror the cart state under a single storage key."""

    def __init__(self, storage: LocalStorage, key: str = CART_KEY) -> None:
        self.storage = storage
        self.key = key

    def save(self, state: CartState) -> None:
        payload = {"state": state.model_dump(mode="json", by_alias=True)}
        try:
            self.storage.set_item(self.key, payload)
        except OSError as exc:
            logger.error("Could not persist cart to %s: %s", self.storage.path, exc)

    def load(self) -> CartState:
        payload = self.storage.get_item(self.key)
        if payload is None:
            return CartState()
        try:
            return CartState.model_validate(payload["state"])
        except (KeyError, TypeError, ValidationError) as exc:
            logger.warning("Discarding invalid persisted cart: %s", exc)
            try:
                self.storage.remove_item(self.key)
            except OSError as err:
                logger.error("Could not discard persisted cart: %s", err)
            return CartState()


def load_language(storage: LocalStorage) -> str:
    return language_or_default(storage.get_item(LANGUAGE_KEY), config.default_language)


def save_language(storage: LocalStorage, language: str) -> None:
    storage.set_item(LANGUAGE_KEY, language_or_default(language, config.default_language))


def load_cart_store(storage: LocalStorage) -> CartStore:
    persistence = CartPersistence(storage)
    return CartStore(state=persistence.load(), persistence=persistence)


def load_state(storage: Optional[LocalStorage] = None) -> None:
    """Restore the cart and language preference into ``st.session_state``."""
    storage = storage or LocalStorage()
    if "cart_store" not in st.session_state:
        st.session_state["cart_store"] = load_cart_store(storage)
    st.session_state.setdefault("language", load_language(storage))


def save_state(storage: Optional[LocalStorage] = None) -> None:
    """Persist the language preference. The cart store writes itself through.

    Widget keys share ``st.session_state`` with application data and are never
    written back, since Streamlit refuses manual assignment to widget keys.
    """
    storage = storage or LocalStorage()
    if "language" not in st.session_state:
        return
    try:
        save_language(storage, st.session_state["language"])
    except OSError as exc:
        logger.error("Could not persist language preference: %s", exc)
