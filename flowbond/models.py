from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ItemSource(str, Enum):
    PURCHASED = "PURCHASED"
    REDEEMED = "REDEEMED"


class ApiModel(BaseModel):
    """Base for records exchanged with the API in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class CartItem(ApiModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True
    )

    id: str
    menu_item_id: str
    name: str
    price: int = 0
    quantity: int = 1
    notes: Optional[str] = None
    image_url: Optional[str] = None
    item_type: str = "OTHER"
    source: ItemSource = ItemSource.PURCHASED
    pass_id: Optional[str] = None

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


class CartState(ApiModel):
    """Snapshot of the cart. Reducers return a new instance on change."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True
    )

    items: List[CartItem] = Field(default_factory=list)
    venue_id: Optional[str] = None
    venue_name: Optional[str] = None
    venue_slug: Optional[str] = None


class Venue(ApiModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    address: Optional[str] = None
    timezone: str = "UTC"
    logo_url: Optional[str] = None
    is_active: bool = True


class Sponsor(ApiModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    is_active: bool = True


class QuestTask(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    type: str = "CUSTOM"
    order: int = 0
    is_required: bool = True


class Quest(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    sponsor_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    max_completions: Optional[int] = None
    completion_count: int = 0
    tasks: List[QuestTask] = Field(default_factory=list)


class MenuItem(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    type: str = "OTHER"
    price: int = 0
    image_url: Optional[str] = None
    is_available: bool = True


class MenuCategory(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    display_order: int = 0
    items: List[MenuItem] = Field(default_factory=list)


class OrderVenue(ApiModel):
    id: str
    name: str
    slug: str


class OrderMenuItem(ApiModel):
    name: str


class OrderLine(ApiModel):
    id: str
    menu_item: OrderMenuItem
    quantity: int = 1
    unit_price: int = 0
    source: ItemSource = ItemSource.PURCHASED
    notes: Optional[str] = None


class Order(ApiModel):
    id: str
    order_number: str
    status: str = "DRAFT"
    total_amount: int = 0
    venue: Optional[OrderVenue] = None
    items: List[OrderLine] = Field(default_factory=list)
