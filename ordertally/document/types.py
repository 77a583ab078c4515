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

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ordertally.domain.errors import LineItemId
from ordertally.domain.money import Money
from ordertally.domain.order import LineItem

DOCUMENT_VERSION = 1


class OrderDocumentError(Exception):
    def __init__(self, code: str, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(frozen=True, slots=True)
class PriceChange:
    item_id: LineItemId
    price: Money


@dataclass(frozen=True, slots=True)
class OrderDocument:
    """
    Parsed order document.

    Holds the requested transitions, not an Order: `items` are added in order,
    then `changes` are applied. Building the Order is what enforces its rules.
    """

    version: int
    items: tuple[LineItem, ...] = ()
    changes: tuple[PriceChange, ...] = ()
    source: str | None = None
