"""HTTP client for the FlowBond REST API."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from core.config import config
from flowbond.models import MenuCategory, Order, Quest, Sponsor, Venue

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiError(Exception):
    """Raised for any failed API call."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(ApiError):
    """The requested record does not exist (HTTP 404)."""


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, list):
            return "; ".join(str(m) for m in message)
        if message:
            return str(message)
    return response.reason_phrase


class FlowBondClient:
    """Thin wrapper over the venue, sponsor and order endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        headers = {"Content-Type": "application/json"}
        token = token or config.api_token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url or config.api_url,
            headers=headers,
            timeout=timeout if timeout is not None else config.api_timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FlowBondClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise ApiError(f"Network error: {exc}") from exc
        if response.status_code == 404:
            raise NotFoundError(_error_message(response), 404)
        if response.is_error:
            message = _error_message(response)
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            raise ApiError(message, response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise ApiError(f"Invalid response body: {exc}", response.status_code) from exc

    def _one(self, model: Type[ModelT], method: str, path: str, **kwargs: Any) -> ModelT:
        data = self._request(method, path, **kwargs)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.warning("%s %s returned an unexpected %s: %s", method, path, model.__name__, exc)
            raise ApiError(f"Unexpected response shape for {model.__name__}") from exc

    def _many(self, model: Type[ModelT], method: str, path: str, **kwargs: Any) -> List[ModelT]:
        data = self._request(method, path, **kwargs) or []
        if not isinstance(data, list):
            raise ApiError(f"Expected a list of {model.__name__} records")
        try:
            return [model.model_validate(record) for record in data]
        except ValidationError as exc:
            logger.warning("%s %s returned an unexpected %s: %s", method, path, model.__name__, exc)
            raise ApiError(f"Unexpected response shape for {model.__name__}") from exc

    # Venues

    def list_venues(self) -> List[Venue]:
        return self._many(Venue, "GET", "/venues")

    def get_venue(self, venue_id: str) -> Venue:
        return self._one(Venue, "GET", f"/venues/{venue_id}")

    def get_venue_by_slug(self, slug: str) -> Venue:
        return self._one(Venue, "GET", f"/venues/slug/{slug}")

    def get_venue_quests(self, venue_id: str) -> List[Quest]:
        return self._many(Quest, "GET", f"/venues/{venue_id}/quests")

    def get_public_menu(self, venue_id: str) -> List[MenuCategory]:
        categories = self._many(MenuCategory, "GET", f"/venues/{venue_id}/menu")
        return sorted(categories, key=lambda c: c.display_order)

    # Sponsors

    def list_sponsors(self) -> List[Sponsor]:
        return self._many(Sponsor, "GET", "/sponsors")

    def get_sponsor(self, sponsor_id: str) -> Sponsor:
        return self._one(Sponsor, "GET", f"/sponsors/{sponsor_id}")

    def get_sponsor_quests(self, sponsor_id: str) -> List[Quest]:
        return self._many(Quest, "GET", f"/sponsors/{sponsor_id}/quests")

    # Orders

    def create_order(self, venue_id: str) -> Order:
        return self._one(Order, "POST", "/orders", json={"venueId": venue_id})

    def get_order(self, order_id: str) -> Order:
        return self._one(Order, "GET", f"/orders/{order_id}")

    def get_my_orders(self) -> List[Order]:
        return self._many(Order, "GET", "/orders/my")

    def add_order_item(
        self, order_id: str, menu_item_id: str, quantity: int, notes: Optional[str] = None
    ) -> Order:
        body: Dict[str, Any] = {"menuItemId": menu_item_id, "quantity": quantity}
        if notes:
            body["notes"] = notes
        return self._one(Order, "POST", f"/orders/{order_id}/items", json=body)

    def remove_order_item(self, order_id: str, item_id: str) -> Order:
        return self._one(Order, "DELETE", f"/orders/{order_id}/items/{item_id}")

    def redeem_order_pass(self, order_id: str, pass_id: str) -> Order:
        return self._one(Order, "POST", f"/orders/{order_id}/redeem", json={"passId": pass_id})

    def checkout_order(self, order_id: str) -> Order:
        return self._one(Order, "POST", f"/orders/{order_id}/checkout")
