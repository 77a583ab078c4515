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

from typing import Any, ClassVar

from ordertally.domain.money import Money

LineItemId = int | str
"""
Opaque, caller-supplied line item identifier.

Examples:
- 0
- "sku-42"
"""


class DomainError(Exception):
    """
    Base class for expected, recoverable business conditions.

    Instances are normally carried inside `Err` rather than raised.
    `code` is stable and machine-readable. Two errors are equal when they
    have the same type and the same `fields` values.
    """

    code: ClassVar[str] = "domain_error"
    fields: ClassVar[tuple[str, ...]] = ()

    def _key(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.fields)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.fields)
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        return f"{self.code}: {self.describe()}"

    def describe(self) -> str:
        return "domain error"


class OrderError(DomainError):
    """Rejections produced by the order aggregate operations."""

    code: ClassVar[str] = "order_error"


class InvalidPriceError(OrderError):
    code: ClassVar[str] = "invalid_price"
    fields: ClassVar[tuple[str, ...]] = ("price", "item_id")

    def __init__(self, price: Money, item_id: LineItemId | None = None) -> None:
        super().__init__(price, item_id)
        self.price = price
        self.item_id = item_id

    def describe(self) -> str:
        target = f" for line item {self.item_id!r}" if self.item_id is not None else ""
        return f"price{target} must not be negative (got {self.price})"


class DuplicateLineItemError(OrderError):
    code: ClassVar[str] = "duplicate_line_item"
    fields: ClassVar[tuple[str, ...]] = ("item_id",)

    def __init__(self, item_id: LineItemId) -> None:
        super().__init__(item_id)
        self.item_id = item_id

    def describe(self) -> str:
        return f"line item {self.item_id!r} already exists in the order"


class LineItemNotFoundError(OrderError):
    code: ClassVar[str] = "line_item_not_found"
    fields: ClassVar[tuple[str, ...]] = ("item_id",)

    def __init__(self, item_id: LineItemId) -> None:
        super().__init__(item_id)
        self.item_id = item_id

    def describe(self) -> str:
        return f"line item {self.item_id!r} is not in the order"


class VersionConflict(DomainError):
    """
    A concurrent writer saved the order first.

    Raised by store collaborators, never by the aggregate. The caller should
    re-read the order and retry.
    """

    code: ClassVar[str] = "version_conflict"
    fields: ClassVar[tuple[str, ...]] = ("order_id", "expected_version", "actual_version")

    def __init__(self, order_id: str, expected_version: int, actual_version: int) -> None:
        super().__init__(order_id, expected_version, actual_version)
        self.order_id = order_id
        self.expected_version = expected_version
        self.actual_version = actual_version

    def describe(self) -> str:
        return (
            f"order {self.order_id!r} is at version {self.actual_version}, "
            f"expected {self.expected_version}"
        )


# Validated value types


class InvalidQuantityError(DomainError):
    code: ClassVar[str] = "invalid_quantity"
    fields: ClassVar[tuple[str, ...]] = ("value",)

    def __init__(self, value: object) -> None:
        super().__init__(value)
        self.value = value

    def describe(self) -> str:
        return f"quantity must be an integer between 1 and 1000 (got {self.value!r})"


class InvalidEmailError(DomainError):
    code: ClassVar[str] = "invalid_email"
    fields: ClassVar[tuple[str, ...]] = ("value",)

    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value = value

    def describe(self) -> str:
        return f"not an email address: {self.value!r}"


class EmailVerificationError(DomainError):
    code: ClassVar[str] = "email_verification_failed"
    fields: ClassVar[tuple[str, ...]] = ("address",)

    def __init__(self, address: str) -> None:
        super().__init__(address)
        self.address = address

    def describe(self) -> str:
        return f"verification code rejected for {self.address}"
