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

from ordertally.cli._io import load_order, render_order, report_rejection, resolve_item_id
from ordertally.cli.exitcodes import exit_code_from_result
from ordertally.core.config import TallyConfig
from ordertally.domain.money import Money
from ordertally.domain.order import change_line_item_price
from ordertally.domain.result import Err
from ordertally.store.memory import InMemoryOrderStore
from ordertally.store.update import update_order

logger = logging.getLogger(__name__)


def run(*, path: str, item_id: str, price: str, cfg: TallyConfig) -> int:
    """
    Build the order from a document, change one item's price, print the result.

    The change goes through the optimistic update loop against an in-memory
    store seeded with the built order, retried up to `cfg.max_attempts`.
    The document itself is not modified.
    """
    new_price = Money.parse(price, decimal_places=cfg.decimal_places)

    built = load_order(path, cfg)
    if isinstance(built, Err):
        report_rejection(built.error)
        return exit_code_from_result(built)

    store = InMemoryOrderStore()
    store.save(path, 0, built.value).unwrap()
    target = resolve_item_id(built.value, item_id)

    result = update_order(
        store,
        path,
        lambda order: change_line_item_price(order, target, new_price),
        max_attempts=cfg.max_attempts,
    )
    if isinstance(result, Err):
        report_rejection(result.error)
    else:
        logger.info("Repriced line item %s to %s", item_id, new_price.format(cfg.decimal_places))
        print(render_order(result.value.order, cfg), end="")
    return exit_code_from_result(result)
