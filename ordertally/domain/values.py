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
Validated value types.

Each type here has exactly one way in: a factory that checks the invariant
and returns a Result. Direct construction is refused, so any instance that
exists is valid for its whole lifetime.

`VerifiedEmail` goes further: only `EmailVerifier.verify` can produce one.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar

from ordertally.domain.errors import EmailVerificationError, InvalidEmailError, InvalidQuantityError
from ordertally.domain.result import Err, Ok, Result

# Module-private construction tokens
_FACTORY = object()
_VERIFIED = object()

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True, slots=True)
class Quantity:
    value: int
    _token: object = field(default=None, repr=False, compare=False)

    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 1000

    def __post_init__(self) -> None:
        if self._token is not _FACTORY:
            raise TypeError("Quantity can only be created with Quantity.create()")

    @classmethod
    def create(cls, value: int) -> Result["Quantity", InvalidQuantityError]:
        if isinstance(value, bool) or not isinstance(value, int):
            return Err(InvalidQuantityError(value=value))
        if not cls.MIN <= value <= cls.MAX:
            return Err(InvalidQuantityError(value=value))
        return Ok(cls(value, _FACTORY))

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class UnverifiedEmail:
    address: str
    _token: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _FACTORY:
            raise TypeError("UnverifiedEmail can only be created with UnverifiedEmail.create()")

    @classmethod
    def create(cls, text: str) -> Result["UnverifiedEmail", InvalidEmailError]:
        address = text.strip() if isinstance(text, str) else ""
        if not _EMAIL_RE.match(address):
            return Err(InvalidEmailError(value=str(text)))
        return Ok(cls(address, _FACTORY))


@dataclass(frozen=True, slots=True)
class VerifiedEmail:
    address: str
    _token: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _VERIFIED:
            raise TypeError("VerifiedEmail can only be produced by EmailVerifier.verify()")


EmailAddress = UnverifiedEmail | VerifiedEmail


class EmailVerifier:
    """
    The only producer of VerifiedEmail.

    `check(address, code)` decides whether a verification code is valid for
    an address; how codes are issued is up to the caller.
    """

    def __init__(self, check: Callable[[str, str], bool]) -> None:
        self._check = check

    def verify(self, email: UnverifiedEmail, code: str) -> Result[VerifiedEmail, EmailVerificationError]:
        if not self._check(email.address, code):
            return Err(EmailVerificationError(address=email.address))
        return Ok(VerifiedEmail(email.address, _VERIFIED))
