import dataclasses
import random

import pytest
from ordertally.domain.errors import (
    DuplicateLineItemError,
    InvalidPriceError,
    LineItemNotFoundError,
    OrderError,
)
from ordertally.domain.money import Money
from ordertally.domain.order import (
    LineItem,
    Order,
    add_line_item,
    change_line_item_price,
    empty,
    total_amount,
)
from ordertally.domain.result import Err, Ok

# ----------------------------
# Helpers
# ----------------------------


def m(text: str) -> Money:
    return Money.parse(text)


def build(*items: LineItem) -> Order:
    order = empty()
    for item in items:
        order = add_line_item(order, item).unwrap()
    return order


# ----------------------------
# Scenarios
# ----------------------------


class TestScenarios:
    def test_empty_order_totals_zero(self):
        order = empty()
        assert total_amount(order) == Money.zero()
        assert len(order) == 0

    def test_add_single_item(self):
        result = add_line_item(empty(), LineItem(id=0, price=m("2.00")))
        assert isinstance(result, Ok)
        assert total_amount(result.value) == m("2.00")

    def test_change_price_recomputes_total(self):
        order = build(LineItem(id=0, price=m("2.00")))

        result = change_line_item_price(order, 0, m("3.00"))

        assert isinstance(result, Ok)
        assert total_amount(result.value) == m("3.00")
        assert result.value.get(0).price == m("3.00")

    def test_negative_price_is_rejected_and_order_unchanged(self):
        order = build(LineItem(id=1, price=m("5.00")))
        before = order.items

        result = add_line_item(order, LineItem(id=0, price=m("-1")))

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidPriceError)
        assert result.error.price == m("-1")
        assert order.items == before
        assert total_amount(order) == m("5.00")

    def test_change_unknown_id_is_rejected(self):
        order = build(LineItem(id=0, price=m("2.00")))

        result = change_line_item_price(order, 99, m("5.00"))

        assert result == Err(LineItemNotFoundError(item_id=99))

    @pytest.mark.parametrize("first, second", [("2.50", "1.25"), ("1.25", "2.50")])
    def test_total_independent_of_insertion_order(self, first, second):
        order = build(LineItem(id="a", price=m(first)), LineItem(id="b", price=m(second)))
        assert total_amount(order) == m("3.75")


# ----------------------------
# Operations
# ----------------------------


class TestAddLineItem:
    def test_duplicate_id_fails_deterministically(self):
        item = LineItem(id=0, price=m("2.00"))
        order = build(item)

        first = add_line_item(order, item)
        second = add_line_item(order, LineItem(id=0, price=m("9.00")))

        assert first == Err(DuplicateLineItemError(item_id=0))
        assert second == Err(DuplicateLineItemError(item_id=0))

    def test_ids_are_typed(self):
        order = build(LineItem(id=0, price=m("1.00")), LineItem(id="0", price=m("2.00")))
        assert order.ids() == (0, "0")
        assert total_amount(order) == m("3.00")

    def test_negative_price_checked_before_duplicate(self):
        order = build(LineItem(id=0, price=m("1.00")))
        result = add_line_item(order, LineItem(id=0, price=m("-1.00")))
        assert isinstance(result.error, InvalidPriceError)

    def test_zero_price_is_allowed(self):
        order = build(LineItem(id=0, price=Money.zero()))
        assert total_amount(order) == Money.zero()
        assert 0 in order

    def test_input_order_is_not_altered(self):
        order = build(LineItem(id=0, price=m("2.00")))
        snapshot = (order.items, order.amount_to_bill)

        order2 = add_line_item(order, LineItem(id=1, price=m("4.00"))).unwrap()

        assert (order.items, order.amount_to_bill) == snapshot
        assert order2 is not order
        assert total_amount(order2) == m("6.00")

    def test_preserves_insertion_order(self):
        order = build(*(LineItem(id=i, price=Money(i)) for i in (3, 1, 2)))
        assert [item.id for item in order] == [3, 1, 2]


class TestChangeLineItemPrice:
    def test_negative_price_rejected(self):
        order = build(LineItem(id=0, price=m("2.00")))
        result = change_line_item_price(order, 0, m("-0.01"))
        assert result == Err(InvalidPriceError(price=m("-0.01"), item_id=0))
        assert order.get(0).price == m("2.00")

    def test_keeps_position_and_other_items(self):
        order = build(
            LineItem(id="a", price=m("1.00")),
            LineItem(id="b", price=m("2.00")),
            LineItem(id="c", price=m("3.00")),
        )

        changed = change_line_item_price(order, "b", m("10.00")).unwrap()

        assert changed.ids() == ("a", "b", "c")
        assert changed.get("a") == order.get("a")
        assert changed.get("c") == order.get("c")
        assert total_amount(changed) == m("14.00")
        assert total_amount(order) == m("6.00")

    def test_same_price_yields_equal_order(self):
        order = build(LineItem(id=0, price=m("2.00")))
        assert change_line_item_price(order, 0, m("2.00")).unwrap() == order


# ----------------------------
# Aggregate boundary
# ----------------------------


class TestOrderValue:
    def test_amount_to_bill_cannot_be_supplied(self):
        with pytest.raises(TypeError):
            Order(items=(), amount_to_bill=Money(500))

    def test_order_is_frozen(self):
        order = build(LineItem(id=0, price=m("2.00")))
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.amount_to_bill = Money(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.get(0).price = Money(1)

    def test_direct_construction_recomputes_total(self):
        order = Order(items=[LineItem(id=0, price=Money(100)), LineItem(id=1, price=Money(25))])
        assert isinstance(order.items, tuple)
        assert order.amount_to_bill == Money(125)

    def test_direct_construction_rejects_duplicates(self):
        with pytest.raises(ValueError):
            Order(items=(LineItem(id=0, price=Money(1)), LineItem(id=0, price=Money(2))))

    def test_direct_construction_rejects_negative_prices(self):
        with pytest.raises(ValueError):
            Order(items=(LineItem(id=0, price=Money(-1)),))

    def test_to_dict(self):
        order = build(LineItem(id=0, price=m("2.00")), LineItem(id="x", price=m("0.50")))
        assert order.to_dict() == {
            "items": [{"id": 0, "price": "2.00"}, {"id": "x", "price": "0.50"}],
            "amount_to_bill": "2.50",
        }


class TestErrors:
    def test_errors_are_order_errors_with_codes(self):
        assert isinstance(InvalidPriceError(price=Money(-1)), OrderError)
        assert DuplicateLineItemError(item_id=1).code == "duplicate_line_item"
        assert LineItemNotFoundError(item_id=1).code == "line_item_not_found"
        assert InvalidPriceError(price=Money(-1)).code == "invalid_price"

    def test_messages(self):
        assert str(LineItemNotFoundError(item_id="sku-1")) == "line_item_not_found: line item 'sku-1' is not in the order"
        assert str(InvalidPriceError(price=Money(-150), item_id=3)) == (
            "invalid_price: price for line item 3 must not be negative (got -1.50)"
        )


# ----------------------------
# Invariants over random histories
# ----------------------------


@pytest.mark.parametrize("seed", range(25))
def test_invariants_hold_over_random_histories(seed: int):
    rng = random.Random(seed)
    order = empty()
    expected: dict[int, int] = {}
    history: list[tuple[Order, list[LineItem], int]] = []

    for _ in range(60):
        history.append((order, list(order.items), order.amount_to_bill.minor_units))
        item_id = rng.randrange(20)
        price = Money(rng.randrange(-5, 10_000))

        if rng.random() < 0.6:
            result = add_line_item(order, LineItem(id=item_id, price=price))
            should_fail = price.is_negative() or item_id in expected
        else:
            result = change_line_item_price(order, item_id, price)
            should_fail = price.is_negative() or item_id not in expected

        if should_fail:
            assert isinstance(result, Err)
            continue

        assert isinstance(result, Ok)
        order = result.value
        expected[item_id] = price.minor_units

        # amount_to_bill is the exact sum of current prices
        assert total_amount(order) == Money(sum(expected.values()))
        assert total_amount(order) == sum((item.price for item in order), Money.zero())
        # ids stay unique
        assert len(set(order.ids())) == len(order)
        assert {item.id: item.price.minor_units for item in order} == expected

    # no earlier value was ever mutated
    for value, items, amount in history:
        assert list(value.items) == items
        assert value.amount_to_bill.minor_units == amount
        assert sum(item.price.minor_units for item in value.items) == amount


@pytest.mark.parametrize("seed", range(10))
def test_total_is_invariant_under_reordered_adds(seed: int):
    rng = random.Random(seed)
    items = [LineItem(id=i, price=Money(rng.randrange(0, 100_000))) for i in range(15)]
    shuffled = items[:]
    rng.shuffle(shuffled)

    assert total_amount(build(*items)) == total_amount(build(*shuffled))
