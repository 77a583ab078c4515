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
Fixed-point money.

Amounts are held as integer minor units (cents for a two-decimal currency),
so sums are exact. Floats are never accepted.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext

DEFAULT_DECIMAL_PLACES = 2


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """
    Monetary amount in integer minor units.

    Money itself may be negative (it is a plain number); whether a negative
    amount is acceptable is decided by whoever consumes it.
    """

    minor_units: int

    def __post_init__(self) -> None:
        if isinstance(self.minor_units, bool) or not isinstance(self.minor_units, int):
            raise TypeError(f"Money requires integer minor units, got {type(self.minor_units).__name__}")

    @staticmethod
    def zero() -> "Money":
        return Money(0)

    @staticmethod
    def parse(value: "str | Decimal | int", *, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> "Money":
        """
        Build Money from a decimal string, a Decimal, or integer minor units.

        "2.00" -> Money(200), Decimal("0.5") -> Money(50), 350 -> Money(350).

        Raises:
            TypeError: for floats, booleans and other types
            ValueError: for non-numeric strings or more fractional digits
                than `decimal_places` allows
        """
        if isinstance(value, bool) or isinstance(value, float):
            raise TypeError(f"Money cannot be built from {type(value).__name__}; use a string or Decimal")

        if isinstance(value, int):
            return Money(value)

        if isinstance(value, str):
            try:
                value = Decimal(value.strip())
            except InvalidOperation as e:
                raise ValueError(f"Not a monetary amount: {value!r}") from e

        if not isinstance(value, Decimal):
            raise TypeError(f"Money cannot be built from {type(value).__name__}")

        if not value.is_finite():
            raise ValueError(f"Not a finite monetary amount: {value}")

        with localcontext() as ctx:
            # enough precision that scaling never rounds
            ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + decimal_places + 1)
            scaled = value.scaleb(decimal_places)
            if scaled != scaled.to_integral_value():
                raise ValueError(f"Amount {value} has more than {decimal_places} decimal places")
            return Money(int(scaled))

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.minor_units + other.minor_units)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.minor_units - other.minor_units)

    def is_negative(self) -> bool:
        return self.minor_units < 0

    def to_decimal(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> Decimal:
        amount = Decimal(self.minor_units)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 1)
            return amount.scaleb(-decimal_places)

    def format(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        return f"{self.to_decimal(decimal_places):f}"

    def __str__(self) -> str:
        return self.format()
