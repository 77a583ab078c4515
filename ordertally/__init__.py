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
Consistency-preserving order aggregate.

    from ordertally import LineItem, Money, add_line_item, empty, total_amount

    order = add_line_item(empty(), LineItem(id=0, price=Money.parse("2.00"))).unwrap()
    total_amount(order)  # Money(minor_units=200)
"""

from ordertally.domain import (
    DomainError,
    DuplicateLineItemError,
    Err,
    InvalidPriceError,
    LineItem,
    LineItemNotFoundError,
    Money,
    Ok,
    Order,
    OrderError,
    Result,
    VersionConflict,
    add_line_item,
    change_line_item_price,
    empty,
    total_amount,
)

__all__ = [
    "Money",
    "LineItem",
    "Order",
    "empty",
    "add_line_item",
    "change_line_item_price",
    "total_amount",
    "Ok",
    "Err",
    "Result",
    "DomainError",
    "OrderError",
    "InvalidPriceError",
    "DuplicateLineItemError",
    "LineItemNotFoundError",
    "VersionConflict",
]
