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

from ordertally.store.memory import InMemoryOrderStore
from ordertally.store.types import OrderId, OrderStore, VersionedOrder
from ordertally.store.update import DEFAULT_MAX_ATTEMPTS, Transition, update_order

__all__ = [
    "OrderId",
    "OrderStore",
    "VersionedOrder",
    "InMemoryOrderStore",
    "DEFAULT_MAX_ATTEMPTS",
    "Transition",
    "update_order",
]
