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

import logging
import threading

from ordertally.domain.errors import VersionConflict
from ordertally.domain.order import Order
from ordertally.domain.result import Err, Ok, Result
from ordertally.store.types import OrderId, VersionedOrder

logger = logging.getLogger(__name__)


class InMemoryOrderStore:
    """
    Thread-safe, process-local OrderStore.

    Keeps the latest committed value per order id. Orders are immutable, so
    values handed out by `load` can be shared freely; only the id -> value
    table is guarded.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._orders: dict[OrderId, VersionedOrder] = {}

    def load(self, order_id: OrderId) -> VersionedOrder | None:
        with self._lock:
            return self._orders.get(order_id)

    def save(
        self,
        order_id: OrderId,
        expected_version: int,
        new_order: Order,
    ) -> Result[VersionedOrder, VersionConflict]:
        with self._lock:
            current = self._orders.get(order_id)
            actual_version = current.version if current is not None else 0

            if actual_version != expected_version:
                logger.debug(
                    "Version conflict on order %s: expected %d, found %d",
                    order_id,
                    expected_version,
                    actual_version,
                )
                return Err(
                    VersionConflict(
                        order_id=order_id,
                        expected_version=expected_version,
                        actual_version=actual_version,
                    )
                )

            saved = VersionedOrder(order_id=order_id, version=actual_version + 1, order=new_order)
            self._orders[order_id] = saved

        logger.debug("Saved order %s at version %d", order_id, saved.version)
        return Ok(saved)

    def order_ids(self) -> list[OrderId]:
        with self._lock:
            return sorted(self._orders)
