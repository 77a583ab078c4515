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

from dataclasses import dataclass
from typing import Protocol

from ordertally.domain.errors import VersionConflict
from ordertally.domain.order import Order
from ordertally.domain.result import Result

OrderId = str


@dataclass(frozen=True, slots=True)
class VersionedOrder:
    """
    An Order value as last committed under `order_id`.

    Version 0 means the order has never been saved.
    """

    order_id: OrderId
    version: int
    order: Order


class OrderStore(Protocol):
    """
    Contract the aggregate expects from whatever keeps orders over time.

    Implementations must make `save` a compare-and-swap: it succeeds only if
    the stored version still equals `expected_version`.
    """

    def load(self, order_id: OrderId) -> VersionedOrder | None: ...

    def save(
        self,
        order_id: OrderId,
        expected_version: int,
        new_order: Order,
    ) -> Result[VersionedOrder, VersionConflict]: ...
