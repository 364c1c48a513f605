#!/usr/bin/env python3
"""
Demo script for the product catalog.

Walks through create, cached lookup, update and delete against in-memory
backends and prints where each lookup was served from.
"""

from product_catalog import InMemoryProductRepository, Product, ProductChanges, ProductService
from product_catalog.logging_config import configure_logging


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def lookup(service: ProductService, product_id: str) -> None:
    """Look a product up and report whether the cache answered."""
    hits_before = service.metrics.hits
    product = service.get_by_id(product_id)
    source = "cache" if service.metrics.hits > hits_before else "store"
    print(f"  get_by_id({product_id[:8]}…) -> {product} [{source}]")


def demo_read_through(service: ProductService) -> str:
    """Demonstrate read-through caching and negative caching."""
    print_section("Read-through caching")

    products = [
        Product(name="Chair", price=80.0, category="Furniture"),
        Product(name="Table", price=150.0, category="Furniture"),
        Product(name="Lamp", price=30.0, category="Lighting"),
    ]

    print("\n📝 Creating products...")
    created = [service.create(p) for p in products]
    for product in created:
        print(f"  ✓ {product.name} ({product.id})")

    chair_id = created[0].id
    print("\n🔍 Looking up the chair twice:")
    lookup(service, chair_id)
    lookup(service, chair_id)

    print("\n🔍 Looking up a missing id twice (the miss is remembered):")
    lookup(service, "missing-product")
    lookup(service, "missing-product")

    print("\n📦 Category reads always go to the store:")
    for product in service.get_by_category("Furniture"):
        print(f"  - {product.name}: {product.price:.2f}")

    return chair_id


def demo_mutations(service: ProductService, chair_id: str) -> None:
    """Demonstrate write-through on update and eviction on delete."""
    print_section("Mutations")

    print("\n✏️  Renaming the chair:")
    updated = service.update(chair_id, ProductChanges(name="Armchair"))
    print(f"  update -> {updated}")
    lookup(service, chair_id)

    print("\n🗑️  Deleting the chair:")
    print(f"  delete -> {service.delete(chair_id)}")
    lookup(service, chair_id)

    print("\n🗑️  Deleting it again:")
    print(f"  delete -> {service.delete(chair_id)}")


def main() -> None:
    configure_logging("WARNING")
    service = ProductService.create(store=InMemoryProductRepository())

    chair_id = demo_read_through(service)
    demo_mutations(service, chair_id)

    print_section("Cache statistics")
    for key, value in service.get_stats().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
