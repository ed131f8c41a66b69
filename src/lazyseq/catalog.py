"""Sample sequences: counters, id and test-data generators, delegation examples."""

from typing import Any, Dict, Iterable, Optional

from faker import Faker

from .sequence import (
    NO_VALUE,
    Bindings,
    IterableSource,
    IteratorHandle,
    SegmentedCoroutine,
    SequenceSource,
    Suspend,
    coroutine,
    delegate,
)

PRODUCT_NAMES = ["Cotton Shirt", "Silk Scarf", "Wool Cap", "Linen Pants", "Denim Jacket"]
PRODUCT_CATEGORIES = ["Textiles", "Accessories", "Apparel"]


@coroutine
def count_up_to(maximum: int):
    """Yield 1, 2, ... maximum."""
    for i in range(1, maximum + 1):
        yield i


@coroutine(unbounded=True)
def count_from(start: int = 1):
    """Yield start, start + 1, ... forever."""
    value = start
    while True:
        yield value
        value += 1


@coroutine(unbounded=True)
def sequential_ids(prefix: str = "TEST"):
    """Yield PREFIX_001, PREFIX_002, ... forever."""
    count = 1
    while True:
        yield f"{prefix}_{count:03d}"
        count += 1


@coroutine(unbounded=True)
def product_data(seed: int = 42):
    """
    Yield product records on demand.

    Names cycle through ``PRODUCT_NAMES``; the category is picked by
    ``id % 3``. Price (100-999) and timestamp come from a Faker instance
    seeded per call, so two coroutines with the same seed agree.
    """
    faker = Faker()
    faker.seed_instance(seed)
    product_id = 1
    while True:
        yield {
            "id": f"PROD_{product_id}",
            "name": PRODUCT_NAMES[(product_id - 1) % len(PRODUCT_NAMES)],
            "price": faker.random_int(min=100, max=999),
            "category": PRODUCT_CATEGORIES[product_id % len(PRODUCT_CATEGORIES)],
            "timestamp": faker.date_time_this_year().isoformat(),
        }
        product_id += 1


@coroutine
def textiles():
    yield "Cotton Shirt"
    yield "Silk Scarf"


@coroutine
def electronics():
    yield "LED Panel"
    yield "Circuit Board"


@coroutine
def all_products():
    """Splice textiles and electronics, then add one item of our own."""
    yield delegate(textiles)
    yield delegate(electronics)
    yield "Custom Item"


@coroutine(unbounded=True)
def echo():
    """Answer every resume value with ``Echo: <value>``."""
    reply = None
    while True:
        received = yield reply
        reply = None if received is NO_VALUE else f"Echo: {received}"


class TrafficLight(SegmentedCoroutine):
    """Green, Yellow, Red, Green, ... as an explicit three-segment machine."""

    infinite = True

    GREEN, YELLOW, RED = 0, 1, 2

    def start(self) -> Dict[str, Any]:
        return {"cycles": 0}

    def resume(self, point: int, local: Bindings, sent: Any) -> Suspend:
        if point == self.GREEN:
            return Suspend("Green", resume_at=self.YELLOW)
        if point == self.YELLOW:
            return Suspend("Yellow", resume_at=self.RED)
        local.cycles += 1
        return Suspend("Red", resume_at=self.GREEN)


class ProductCatalog(IterableSource):
    """A custom container that exposes its products through the iterable capability."""

    def __init__(self, products: Optional[Iterable[str]] = None):
        self.products = list(products) if products is not None else ["Shirt", "Scarf", "Cap", "Pants"]

    def add(self, product: str) -> None:
        self.products.append(product)

    def iterator(self) -> IteratorHandle:
        return SequenceSource(self.products).iterator()

    def __len__(self) -> int:
        return len(self.products)
