"""
Tests for cache coordination in ProductService.
"""

import pytest

from product_catalog.entities import CachedProduct, Product, ProductChanges
from product_catalog.exceptions import StoreUnavailableError
from product_catalog.services import ProductService


def test_cache_hit_avoids_store(service, store, chair):
    """Second lookup of the same id is served from the cache."""
    first = service.get_by_id("p1")
    second = service.get_by_id("p1")

    assert first == chair
    assert second == chair
    assert store.calls["find_by_id"] == 1


def test_lookup_populates_cache(service, cache, chair):
    service.get_by_id("p1")

    assert cache.get("p1") == CachedProduct.of(chair)


def test_negative_result_is_cached(service, store, cache):
    """A missing id is looked up in the store only once."""
    assert service.get_by_id("missing") is None
    assert service.get_by_id("missing") is None

    assert store.calls["find_by_id"] == 1
    entry = cache.get("missing")
    assert entry is not None
    assert entry.is_absent


def test_uncached_and_cached_absent_are_distinct(cache):
    assert cache.get("never-seen") is None
    cache.put("gone", CachedProduct.absent())
    assert cache.get("gone") == CachedProduct.absent()


def test_update_writes_merged_product_to_cache(service, store, cache, chair):
    updated = service.update("p1", ProductChanges(name="Armchair"))

    assert updated == Product(id="p1", name="Armchair", price=80.0, category="Furniture")
    assert cache.get("p1") == CachedProduct.of(updated)

    calls_before = store.calls["find_by_id"]
    assert service.get_by_id("p1") == updated
    assert store.calls["find_by_id"] == calls_before


def test_update_replaces_stale_cached_value(service, chair):
    service.get_by_id("p1")
    service.update("p1", ProductChanges(price=95.5))

    assert service.get_by_id("p1").price == 95.5


def test_update_persists_all_changed_fields(service, store, chair):
    service.update("p1", ProductChanges(name="Stool", price=20.0, category="Seating"))

    stored = store.find_by_id("p1")
    assert stored == Product(id="p1", name="Stool", price=20.0, category="Seating")


def test_update_missing_product_leaves_cache_untouched(service, store, cache):
    cache.put("all", CachedProduct.absent())

    assert service.update("nope", ProductChanges(name="Ghost")) is None

    assert store.calls["save"] == 0
    assert cache.get("nope") is None
    assert "all" in cache


def test_update_evicts_aggregate_key(service, cache, chair):
    cache.put(ProductService.ALL_KEY, CachedProduct.absent())

    service.update("p1", ProductChanges(name="Armchair"))

    assert ProductService.ALL_KEY not in cache


def test_delete_evicts_entry(service, store, cache, chair):
    service.get_by_id("p1")
    assert "p1" in cache

    assert service.delete("p1") is True

    assert "p1" not in cache
    assert service.get_by_id("p1") is None
    assert store.calls["find_by_id"] == 2


def test_delete_evicts_aggregate_key(service, cache, chair):
    cache.put(ProductService.ALL_KEY, CachedProduct.absent())

    service.delete("p1")

    assert ProductService.ALL_KEY not in cache


def test_delete_missing_product_short_circuits(service, store, cache):
    cache.put("all", CachedProduct.absent())

    assert service.delete("nonexistent") is False

    assert store.calls["exists_by_id"] == 1
    assert store.calls["delete_by_id"] == 0
    assert "all" in cache


def test_category_reads_bypass_cache(service):
    service.create(Product(name="Chair", price=80.0, category="Furniture"))
    first = service.get_by_category("Furniture")

    service.create(Product(name="Table", price=150.0, category="Furniture"))
    second = service.get_by_category("Furniture")

    assert len(first) == 1
    assert {p.name for p in second} == {"Chair", "Table"}


def test_unknown_category_is_empty(service, chair):
    assert service.get_by_category("Unknown") == []


def test_list_all_bypasses_cache(service, store):
    assert service.list_all() == []
    service.create(Product(name="Lamp", price=30.0, category="Lighting"))

    assert [p.name for p in service.list_all()] == ["Lamp"]
    assert store.calls["find_all"] == 2


def test_create_assigns_id_and_skips_per_id_cache(service, store, cache):
    saved = service.create(Product(name="Laptop Pro", price=1500.0, category="Electronics"))

    assert saved.id
    assert saved.name == "Laptop Pro"
    assert store.find_by_id(saved.id) == saved
    assert saved.id not in cache


def test_create_evicts_aggregate_key(service, cache):
    cache.put(ProductService.ALL_KEY, CachedProduct.absent())

    service.create(Product(name="Desk", price=200.0, category="Furniture"))

    assert ProductService.ALL_KEY not in cache


def test_create_with_explicit_id_evicts_remembered_miss(service):
    assert service.get_by_id("fixed") is None

    service.create(Product(id="fixed", name="Shelf", price=45.0, category="Furniture"))

    assert service.get_by_id("fixed").name == "Shelf"


def test_store_fault_propagates_and_is_not_cached(service, store, cache, chair):
    store.unavailable = True
    with pytest.raises(StoreUnavailableError):
        service.get_by_id("p1")
    assert cache.get("p1") is None

    store.unavailable = False
    assert service.get_by_id("p1") == chair


def test_store_fault_on_delete_propagates(service, store, chair):
    store.unavailable = True
    with pytest.raises(StoreUnavailableError):
        service.delete("p1")


def test_stats_count_hits_and_misses(service, chair):
    service.get_by_id("p1")
    service.get_by_id("p1")
    service.get_by_id("missing")

    stats = service.get_stats()
    assert stats["cache_name"] == "products"
    assert stats["hits"] == 1
    assert stats["misses"] == 2
    assert stats["puts"] == 2
    assert stats["hit_rate"] == pytest.approx(1 / 3)


def test_clear_cache(service, store, chair):
    service.get_by_id("p1")

    assert service.clear_cache() == 1
    service.get_by_id("p1")
    assert store.calls["find_by_id"] == 2


def test_create_factory_defaults_to_memory_cache(store):
    service = ProductService.create(store=store)

    assert service.cache.name == "products"
    assert service.is_healthy()


def test_update_evicts_aggregate_key_before_store_write(service, store, cache, chair):
    service.get_by_id("p1")
    cache.put(ProductService.ALL_KEY, CachedProduct.absent())
    store.failing.add("save")

    with pytest.raises(StoreUnavailableError):
        service.update("p1", ProductChanges(name="Armchair"))

    assert ProductService.ALL_KEY not in cache
    assert cache.get("p1") == CachedProduct.of(chair)


def test_delete_evicts_aggregate_key_before_store_delete(service, store, cache, chair):
    service.get_by_id("p1")
    cache.put(ProductService.ALL_KEY, CachedProduct.absent())
    store.failing.add("delete_by_id")

    with pytest.raises(StoreUnavailableError):
        service.delete("p1")

    assert ProductService.ALL_KEY not in cache
    assert cache.get("p1") == CachedProduct.of(chair)
    assert store.find_by_id("p1") == chair
