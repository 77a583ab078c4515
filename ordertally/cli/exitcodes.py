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

from ordertally.domain.result import Err, Result

# CI-friendly semantics
EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ENGINE_ERROR = 2


def exit_code_from_result(result: Result) -> int:
    """
    Policy:
      - Err (a business rejection) => EXIT_REJECTED
      - else EXIT_OK

    Engine problems (unreadable files, bad config) never reach a Result;
    they are raised and mapped to EXIT_ENGINE_ERROR by the entry point.
    """
    return EXIT_REJECTED if isinstance(result, Err) else EXIT_OK
