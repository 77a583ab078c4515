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

from ordertally.domain.errors import (
    DomainError,
    DuplicateLineItemError,
    EmailVerificationError,
    InvalidEmailError,
    InvalidPriceError,
    InvalidQuantityError,
    LineItemId,
    LineItemNotFoundError,
    OrderError,
    VersionConflict,
)
from ordertally.domain.money import DEFAULT_DECIMAL_PLACES, Money
from ordertally.domain.order import (
    LineItem,
    Order,
    add_line_item,
    change_line_item_price,
    empty,
    total_amount,
)
from ordertally.domain.result import Err, Ok, Result
from ordertally.domain.values import EmailAddress, EmailVerifier, Quantity, UnverifiedEmail, VerifiedEmail

__all__ = [
    "Money",
    "DEFAULT_DECIMAL_PLACES",
    "LineItem",
    "LineItemId",
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
    "InvalidQuantityError",
    "InvalidEmailError",
    "EmailVerificationError",
    "Quantity",
    "UnverifiedEmail",
    "VerifiedEmail",
    "EmailAddress",
    "EmailVerifier",
]
