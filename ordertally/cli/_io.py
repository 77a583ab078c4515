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

import sys
from pathlib import Path

from ordertally.core.config import TallyConfig
from ordertally.document.builder import build_order, dump_order
from ordertally.document.loader import DefaultOrderLoader
from ordertally.domain.errors import DomainError, LineItemId
from ordertally.domain.order import Order
from ordertally.domain.result import Result


def ensure_document(path: str) -> Path:
    p = Path(path).resolve()
    if not p.exists():
        raise FileNotFoundError(f"Path does not exist: {p}")
    return p


def load_order(path: str, cfg: TallyConfig) -> Result[Order, DomainError]:
    document = DefaultOrderLoader(decimal_places=cfg.decimal_places).load(ensure_document(path))
    return build_order(document)


def resolve_item_id(order: Order, raw: str) -> LineItemId:
    """
    Map a command-line id onto the order's ids.

    Ids are typed (0 and "0" differ), but argv is always text. An exact
    string match wins; otherwise an all-digit argument is read as an integer.
    """
    if raw in order:
        return raw
    if raw.lstrip("-").isdigit() and int(raw) in order:
        return int(raw)
    return raw


def render_order(order: Order, cfg: TallyConfig) -> str:
    if cfg.output_format in ("json", "yaml"):
        return dump_order(order, cfg.output_format, decimal_places=cfg.decimal_places)

    lines = [f"Order: {len(order)} item{'s' if len(order) != 1 else ''}"]
    width = max((len(str(item.id)) for item in order), default=0)
    for item in order:
        lines.append(f"  {str(item.id).ljust(width)}  {item.price.format(cfg.decimal_places)}")
    lines.append(f"Total: {order.amount_to_bill.format(cfg.decimal_places)}")
    return "\n".join(lines) + "\n"


def report_rejection(error: DomainError) -> None:
    print(f"ordertally: rejected: {error}", file=sys.stderr)
