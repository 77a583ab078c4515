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

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from ordertally.document.types import DOCUMENT_VERSION, OrderDocument, OrderDocumentError, PriceChange
from ordertally.domain.errors import LineItemId
from ordertally.domain.money import DEFAULT_DECIMAL_PLACES, Money
from ordertally.domain.order import LineItem

logger = logging.getLogger(__name__)


class DecimalSafeLoader(yaml.SafeLoader):
    """SafeLoader that reads bare decimals (`2.10`) as Decimal from their source text."""


def _construct_decimal(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> Any:
    text = loader.construct_scalar(node)
    try:
        return Decimal(text)
    except InvalidOperation:
        # .inf, .nan, sexagesimal: left as floats, rejected as prices later
        return loader.construct_yaml_float(node)


DecimalSafeLoader.add_constructor("tag:yaml.org,2002:float", _construct_decimal)


class DefaultOrderLoader:
    """
    Loads an OrderDocument from order.yaml / order.yml / order.json

    Prices may be written as decimal strings ("2.00") or as integer minor
    units (200). Bare decimal numbers are read through their literal text,
    so `2.10` in YAML means 210 minor units and `2.105` is rejected.
    """

    def __init__(self, *, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> None:
        self._decimal_places = decimal_places

    def load(self, path: Path) -> OrderDocument:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise OrderDocumentError(code="document_not_found", message=f"Order document does not exist: {path}")

        logger.debug("Loading order document %s", path)
        data = self._read_document_file(path)
        return self.parse(data, source=str(path))

    def parse(self, data: Any, *, source: str | None = None) -> OrderDocument:
        if not isinstance(data, dict):
            raise OrderDocumentError(code="invalid_document", message="Order document root must be a mapping/object.")

        version = data.get("version", DOCUMENT_VERSION)
        if not isinstance(version, int) or isinstance(version, bool):
            raise OrderDocumentError(code="invalid_version", message="'version' must be an integer.")
        if version != DOCUMENT_VERSION:
            raise OrderDocumentError(
                code="unsupported_version",
                message=f"Unsupported order document version: {version}",
                details={"supported": [DOCUMENT_VERSION]},
            )

        items = tuple(
            LineItem(id=item_id, price=price) for item_id, price in self._parse_entries(data.get("items"), "items")
        )
        changes = tuple(
            PriceChange(item_id=item_id, price=price)
            for item_id, price in self._parse_entries(data.get("changes"), "changes")
        )

        logger.debug("Parsed %d items and %d price changes from %s", len(items), len(changes), source or "<data>")
        return OrderDocument(version=version, items=items, changes=changes, source=source)

    def _read_document_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        try:
            raw = path.read_text(encoding="utf-8")
            if suffix == ".json":
                return json.loads(raw, parse_float=Decimal)
            if suffix in (".yaml", ".yml"):
                return yaml.load(raw, Loader=DecimalSafeLoader)
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise OrderDocumentError(
                code="unreadable_document",
                message=f"Could not parse {path.name}: {e}",
                details={"path": str(path)},
            ) from e

        raise OrderDocumentError(
            code="unsupported_extension",
            message=f"Unsupported order document extension: {path.suffix!s}",
            details={"supported": [".yaml", ".yml", ".json"]},
        )

    def _parse_entries(self, raw: Any, section: str) -> list[tuple[LineItemId, Money]]:
        if raw is None:
            return []

        if not isinstance(raw, list):
            raise OrderDocumentError(code=f"invalid_{section}", message=f"'{section}' must be a list.")

        out: list[tuple[LineItemId, Money]] = []
        for idx, entry in enumerate(raw):
            where = f"{section}[{idx}]"
            if not isinstance(entry, dict):
                raise OrderDocumentError(code=f"invalid_{section}", message=f"{where} must be a mapping/object.")
            if "id" not in entry or "price" not in entry:
                raise OrderDocumentError(
                    code=f"invalid_{section}",
                    message=f"{where} requires 'id' and 'price'.",
                    details={"entry": dict(entry)},
                )
            out.append((self._parse_id(entry["id"], where), self._parse_price(entry["price"], where)))
        return out

    def _parse_id(self, raw: Any, where: str) -> LineItemId:
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise OrderDocumentError(code="invalid_id", message=f"{where}.id must be an integer or a string.")
        return raw

    def _parse_price(self, raw: Any, where: str) -> Money:
        try:
            return Money.parse(raw, decimal_places=self._decimal_places)
        except (TypeError, ValueError) as e:
            raise OrderDocumentError(
                code="invalid_price",
                message=f"{where}.price is not a valid amount: {e}",
                details={"price": str(raw)},
            ) from e
