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
Optimistic update loop.

Read version N, compute the next value, commit only if the store is still at
version N, otherwise re-read and try again.
"""

import logging
from collections.abc import Callable

from ordertally.domain.errors import DomainError, VersionConflict
from ordertally.domain.order import Order, empty
from ordertally.domain.result import Err, Result
from ordertally.store.types import OrderId, OrderStore, VersionedOrder

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3

Transition = Callable[[Order], Result[Order, DomainError]]


def update_order(
    store: OrderStore,
    order_id: OrderId,
    transition: Transition,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Result[VersionedOrder, DomainError]:
    """
    Apply `transition` to the stored order and commit it.

    A missing order starts from `empty()` at version 0. A rejected transition
    is returned immediately and nothing is saved. A VersionConflict triggers a
    re-read and another attempt; after `max_attempts` the last conflict is
    returned.

    `transition` may run more than once, so it must not have side effects.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 1
    while True:
        current = store.load(order_id)
        version = current.version if current is not None else 0
        order = current.order if current is not None else empty()

        proposed = transition(order)
        if isinstance(proposed, Err):
            return proposed

        saved = store.save(order_id, version, proposed.value)
        if not isinstance(saved, Err) or not isinstance(saved.error, VersionConflict):
            return saved

        logger.info("Order %s changed concurrently (attempt %d of %d)", order_id, attempt, max_attempts)
        if attempt >= max_attempts:
            return saved
        attempt += 1
