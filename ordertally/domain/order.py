# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Ordertally Contributors
#
# This file is part of Ordertally.
#
# Ordertally is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Ordertally is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

"""
Order aggregate.

An `Order` is an immutable value: a tuple of line items plus the amount to
bill. The amount is never supplied by a caller. It is recomputed from the
items whenever an `Order` is constructed, so it cannot drift from them.

The four operations below are the whole public contract. Each returns a new
`Order` (or an `Err`) and leaves its input untouched.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from ordertally.domain.errors import (
    DuplicateLineItemError,
    InvalidPriceError,
    LineItemId,
    LineItemNotFoundError,
    OrderError,
)
from ordertally.domain.money import DEFAULT_DECIMAL_PLACES, Money
from ordertally.domain.result import Err, Ok, Result


@dataclass(frozen=True, slots=True)
class LineItem:
    id: LineItemId
    price: Money

    def with_price(self, price: Money) -> "LineItem":
        return replace(self, price=price)

    def to_dict(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> dict[str, Any]:
        return {"id": self.id, "price": self.price.format(decimal_places)}


@dataclass(frozen=True, slots=True)
class Order:
    """
    Immutable order aggregate.

    Invariants held by every instance:
      - amount_to_bill equals the sum of item prices
      - item ids are unique
      - no item has a negative price

    Constructing an Order that breaks the last two is a programming error and
    raises ValueError. Use `empty()` and the operations instead.
    """

    items: tuple[LineItem, ...] = ()
    amount_to_bill: Money = field(init=False)

    def __post_init__(self) -> None:
        items = tuple(self.items)
        seen: set[LineItemId] = set()
        for item in items:
            if item.price.is_negative():
                raise ValueError(f"Line item {item.id!r} has a negative price: {item.price}")
            if item.id in seen:
                raise ValueError(f"Duplicate line item id: {item.id!r}")
            seen.add(item.id)

        object.__setattr__(self, "items", items)
        object.__setattr__(self, "amount_to_bill", sum((item.price for item in items), Money.zero()))

    def get(self, item_id: LineItemId) -> LineItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def ids(self) -> tuple[LineItemId, ...]:
        return tuple(item.id for item in self.items)

    def __contains__(self, item_id: object) -> bool:
        return any(item.id == item_id for item in self.items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> dict[str, Any]:
        return {
            "items": [item.to_dict(decimal_places) for item in self.items],
            "amount_to_bill": self.amount_to_bill.format(decimal_places),
        }


def empty() -> Order:
    return Order()


def add_line_item(order: Order, item: LineItem) -> Result[Order, OrderError]:
    """
    Append `item` to `order`.

    Fails with InvalidPriceError if the price is negative, then with
    DuplicateLineItemError if the id is already present.
    """
    if item.price.is_negative():
        return Err(InvalidPriceError(price=item.price, item_id=item.id))
    if item.id in order:
        return Err(DuplicateLineItemError(item_id=item.id))
    return Ok(Order(items=order.items + (item,)))


def change_line_item_price(order: Order, item_id: LineItemId, new_price: Money) -> Result[Order, OrderError]:
    """
    Replace the price of one line item, keeping its position.

    Fails with InvalidPriceError if `new_price` is negative, then with
    LineItemNotFoundError if `item_id` is absent.
    """
    if new_price.is_negative():
        return Err(InvalidPriceError(price=new_price, item_id=item_id))
    if item_id not in order:
        return Err(LineItemNotFoundError(item_id=item_id))
    items = tuple(item.with_price(new_price) if item.id == item_id else item for item in order.items)
    return Ok(Order(items=items))


def total_amount(order: Order) -> Money:
    return order.amount_to_bill
