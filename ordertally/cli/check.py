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

from ordertally.cli._io import load_order, report_rejection
from ordertally.cli.exitcodes import exit_code_from_result
from ordertally.core.config import TallyConfig
from ordertally.domain.result import Err


def run(*, path: str, cfg: TallyConfig) -> int:
    result = load_order(path, cfg)
    if isinstance(result, Err):
        report_rejection(result.error)
    else:
        order = result.value
        noun = "item" if len(order) == 1 else "items"
        print(f"OK: {len(order)} {noun}, total {order.amount_to_bill.format(cfg.decimal_places)}")
    return exit_code_from_result(result)
