"""
Тесты для Cart Store

Coverage:
- merge-on-add (одна строка на product_id, сумма количеств)
- политика переполнения: CLAMP (по умолчанию) и REJECT
- set_quantity / increase / decrease / remove / clear
- write-through после каждой мутации
- ошибки валидации не меняют состояние
- восстановление корзины из хранилища
- деградация до режима "только память" при сбое записи
"""

from decimal import Decimal

import pytest

from storefront.cart import CartStore
from storefront.catalog import CatalogProvider
from storefront.config import MergePolicy, StorefrontConfig
from storefront.core.domain import CartSnapshot, Product
from storefront.core.errors import InvalidQuantityError, NotFoundError
from storefront.storage import InMemoryKeyValueStore, StorageAdapter, deserialize


@pytest.fixture
def products():
    return [
        Product(id=1, name="Mug", list_price=Decimal("399.00"), sale_price=Decimal("299.00"), image_ref="mug.png"),
        Product(id=2, name="Pen", list_price=Decimal("1.50"), sale_price=Decimal("0.10"), image_ref="pen.png"),
        Product(id=3, name="Lamp", list_price=Decimal("1200"), sale_price=Decimal("999.99"), image_ref="lamp.png"),
    ]


@pytest.fixture
def catalog(products):
    return CatalogProvider(products)


@pytest.fixture
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture
def storage(kv):
    return StorageAdapter(kv)


@pytest.fixture
def cart(catalog, storage):
    return CartStore(catalog, storage)


def persisted(kv):
    """Строки, записанные в хранилище"""
    return deserialize(kv.get_item("ecommerceCart"))


# =============================================================================
# ADD ITEM
# =============================================================================


class TestAddItem:
    """Тесты add_item"""

    def test_add_creates_line_with_snapshot(self, cart):
        snapshot = cart.add_item(1, 2)

        assert isinstance(snapshot, CartSnapshot)
        (line,) = cart.lines()
        assert line.product_id == 1
        assert line.display_name == "Mug"
        assert line.unit_price == Decimal("299.00")
        assert line.image_ref == "mug.png"
        assert line.quantity == 2

    def test_merge_on_add(self, cart):
        """empty → add(1, 2) → add(1, 3) → одна строка quantity=5"""
        cart.add_item(1, 2)
        cart.add_item(1, 3)

        lines = cart.lines()
        assert len(lines) == 1
        assert lines[0].product_id == 1
        assert lines[0].quantity == 5
        assert cart.total_item_count() == 5

    def test_insertion_order_preserved(self, cart):
        """Первое добавление определяет позицию строки"""
        cart.add_item(3, 1)
        cart.add_item(1, 1)
        cart.add_item(3, 4)

        assert [line.product_id for line in cart.lines()] == [3, 1]

    def test_merge_clamps_at_99_by_default(self, cart):
        cart.add_item(1, 60)
        snapshot = cart.add_item(1, 60)

        assert cart.get_line(1).quantity == 99
        assert snapshot.total_item_count == 99

    def test_merge_reject_policy(self, catalog, storage, kv):
        cart = CartStore(catalog, storage, StorefrontConfig(merge_policy=MergePolicy.REJECT))
        cart.add_item(1, 60)

        with pytest.raises(InvalidQuantityError):
            cart.add_item(1, 40)

        assert cart.get_line(1).quantity == 60
        assert persisted(kv)[0].quantity == 60

    def test_reject_policy_allows_exactly_99(self, catalog, storage):
        cart = CartStore(catalog, storage, StorefrontConfig(merge_policy=MergePolicy.REJECT))
        cart.add_item(1, 90)
        cart.add_item(1, 9)
        assert cart.get_line(1).quantity == 99

    def test_unknown_product(self, cart, kv):
        with pytest.raises(NotFoundError):
            cart.add_item(42, 1)
        assert cart.lines() == ()
        assert kv.get_item("ecommerceCart") is None

    @pytest.mark.parametrize("quantity", [0, -1, 100, 2.0, "3", True])
    def test_invalid_quantity_does_not_change_state(self, cart, quantity):
        cart.add_item(1, 1)
        with pytest.raises(InvalidQuantityError):
            cart.add_item(1, quantity)
        assert cart.get_line(1).quantity == 1

    def test_add_writes_through(self, cart, kv):
        cart.add_item(2, 3)
        assert persisted(kv) == list(cart.lines())


# =============================================================================
# SET QUANTITY / INCREASE / DECREASE / REMOVE
# =============================================================================


class TestQuantityMutations:
    """Тесты set_quantity, increase_quantity, decrease_quantity, remove_item"""

    def test_set_quantity(self, cart, kv):
        cart.add_item(1, 1)
        cart.set_quantity(1, 7)
        assert cart.get_line(1).quantity == 7
        assert persisted(kv)[0].quantity == 7

    def test_set_quantity_clamps_to_99(self, cart):
        cart.add_item(1, 1)
        cart.set_quantity(1, 500)
        assert cart.get_line(1).quantity == 99

    def test_set_quantity_zero_removes(self, cart):
        """Строка с quantity 5 → set_quantity(1, 0) → lines() == ()"""
        cart.add_item(1, 5)
        snapshot = cart.set_quantity(1, 0)
        assert cart.lines() == ()
        assert snapshot.is_empty

    def test_set_quantity_negative_removes(self, cart):
        cart.add_item(1, 5)
        cart.set_quantity(1, -3)
        assert cart.get_line(1) is None

    def test_set_quantity_zero_equals_remove(self, catalog):
        """set_quantity(id, 0) и remove_item(id) дают одинаковое состояние"""
        kv_a, kv_b = InMemoryKeyValueStore(), InMemoryKeyValueStore()
        cart_a = CartStore(catalog, StorageAdapter(kv_a))
        cart_b = CartStore(catalog, StorageAdapter(kv_b))
        for cart in (cart_a, cart_b):
            cart.add_item(1, 2)
            cart.add_item(3, 1)

        cart_a.set_quantity(1, 0)
        cart_b.remove_item(1)

        assert cart_a.lines() == cart_b.lines()
        assert kv_a.get_item("ecommerceCart") == kv_b.get_item("ecommerceCart")

    def test_set_quantity_missing_line_is_noop(self, cart, kv):
        snapshot = cart.set_quantity(1, 3)
        assert snapshot.is_empty
        assert kv.get_item("ecommerceCart") is None

    def test_set_quantity_rejects_non_int(self, cart):
        cart.add_item(1, 2)
        with pytest.raises(InvalidQuantityError):
            cart.set_quantity(1, 1.5)
        assert cart.get_line(1).quantity == 2

    def test_increase_and_decrease(self, cart):
        cart.add_item(1, 1)
        cart.increase_quantity(1)
        cart.increase_quantity(1)
        assert cart.get_line(1).quantity == 3

        cart.decrease_quantity(1)
        assert cart.get_line(1).quantity == 2

    def test_decrease_from_one_removes(self, cart):
        cart.add_item(1, 1)
        cart.decrease_quantity(1)
        assert cart.is_empty()

    def test_increase_stops_at_99(self, cart):
        cart.add_item(1, 99)
        cart.increase_quantity(1)
        assert cart.get_line(1).quantity == 99

    def test_increase_missing_line_is_noop(self, cart):
        assert cart.increase_quantity(2).is_empty
        assert cart.decrease_quantity(2).is_empty

    def test_remove_missing_is_noop(self, cart, kv):
        cart.remove_item(1)
        assert kv.get_item("ecommerceCart") is None

    def test_remove_writes_through(self, cart, kv):
        cart.add_item(1, 1)
        cart.add_item(2, 1)
        cart.remove_item(1)
        assert [line.product_id for line in persisted(kv)] == [2]

    def test_clear(self, cart, kv):
        cart.add_item(1, 1)
        cart.add_item(2, 4)
        snapshot = cart.clear()
        assert snapshot.is_empty
        assert cart.total_item_count() == 0
        assert kv.get_item("ecommerceCart") == "[]"


# =============================================================================
# QUERIES
# =============================================================================


class TestQueries:
    """Тесты total_item_count, total_price, lines"""

    def test_empty_totals(self, cart):
        assert cart.total_item_count() == 0
        assert cart.total_price() == Decimal("0")

    def test_total_price_exact(self, cart):
        """Сумма unit_price * quantity без округления"""
        cart.add_item(2, 3)
        cart.add_item(3, 2)
        assert cart.total_price() == Decimal("0.30") + Decimal("1999.98")
        assert cart.total_price() == sum(
            (line.unit_price * line.quantity for line in cart.lines()), Decimal("0")
        )

    def test_lines_is_read_only_view(self, cart):
        cart.add_item(1, 1)
        lines = cart.lines()
        assert isinstance(lines, tuple)
        cart.add_item(2, 1)
        assert len(lines) == 1

    def test_snapshot_matches_queries(self, cart):
        cart.add_item(1, 2)
        cart.add_item(3, 1)
        snapshot = cart.snapshot()
        assert snapshot.lines == cart.lines()
        assert snapshot.total_item_count == cart.total_item_count()
        assert snapshot.total_price == cart.total_price()


# =============================================================================
# PERSISTENCE
# =============================================================================


class TestPersistence:
    """Тесты восстановления и деградации хранилища"""

    def test_restores_from_storage(self, catalog, kv):
        first = CartStore(catalog, StorageAdapter(kv))
        first.add_item(3, 2)
        first.add_item(1, 1)

        reloaded = CartStore(catalog, StorageAdapter(kv))
        assert reloaded.lines() == first.lines()

    def test_corrupt_storage_starts_empty(self, catalog, kv):
        kv.set_item("ecommerceCart", "corrupted!")
        reported = []

        cart = CartStore(catalog, StorageAdapter(kv, reporter=reported.append))

        assert cart.is_empty()
        assert len(reported) == 1

    def test_write_failure_keeps_memory_state(self, catalog):
        reported = []
        storage = StorageAdapter(InMemoryKeyValueStore(quota_bytes=16), reporter=reported.append)
        cart = CartStore(catalog, storage)

        snapshot = cart.add_item(1, 2)

        assert snapshot.total_item_count == 2
        assert cart.get_line(1).quantity == 2
        assert not cart.persistence_healthy
        assert len(reported) == 1

    def test_persistence_recovers(self, catalog):
        storage = StorageAdapter(InMemoryKeyValueStore(quota_bytes=120))
        cart = CartStore(catalog, storage)

        cart.add_item(1, 1)
        assert cart.persistence_healthy

        cart.add_item(3, 1)
        assert not cart.persistence_healthy

        cart.remove_item(3)
        assert cart.persistence_healthy

    def test_independent_stores(self, catalog):
        """Нет глобального состояния: две корзины не влияют друг на друга"""
        a = CartStore(catalog, StorageAdapter(InMemoryKeyValueStore()))
        b = CartStore(catalog, StorageAdapter(InMemoryKeyValueStore()))
        a.add_item(1, 1)
        assert b.is_empty()
