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

import json

import yaml

from ordertally.document.types import OrderDocument
from ordertally.domain.errors import OrderError
from ordertally.domain.money import DEFAULT_DECIMAL_PLACES
from ordertally.domain.order import Order, add_line_item, change_line_item_price, empty
from ordertally.domain.result import Ok, Result


def build_order(document: OrderDocument) -> Result[Order, OrderError]:
    """
    Replay a document through the aggregate operations.

    Adds run first, in document order, then price changes. The first
    rejection stops the replay and is returned as-is.
    """
    result: Result[Order, OrderError] = Ok(empty())

    for item in document.items:
        result = result.and_then(lambda order, item=item: add_line_item(order, item))

    for change in document.changes:
        result = result.and_then(lambda order, change=change: change_line_item_price(order, change.item_id, change.price))

    return result


def dump_order(order: Order, fmt: str = "json", *, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """
    Serialize an order deterministically.

    Item order is preserved (it is the order's iteration order); mapping keys
    are fixed.
    """
    data = order.to_dict(decimal_places)

    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    raise ValueError(f"Unsupported output format: {fmt}")
