"""Main entry point: a guided walk through the lazy sequence toolkit."""

import logging
import sys
from typing import Any, Dict

from .catalog import (
    ProductCatalog,
    TrafficLight,
    all_products,
    count_from,
    count_up_to,
    echo,
    product_data,
    sequential_ids,
)
from .config import LazySeqConfig, get_config
from .sequence import (
    MemoryProfiler,
    SetSource,
    batch,
    drain_all,
    filter_handle,
    iterator,
    map_handle,
    take,
    to_frame,
)
from .sequence.utils import format_bytes

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def show_sources():
    """Iterate the built-in containers through the iterable capability."""
    logger.info("Text: " + " ".join(f"[{char}]" for char in iterator("HELLO")))

    settings = {"browser": "chromium", "headless": "true", "timeout": "30000"}
    for key, value in iterator(settings):
        logger.info(f"Mapping entry: {key} = {value}")

    tags = SetSource(["cotton", "premium", "organic", "cotton"])
    logger.info(f"Set values ({len(tags)} unique): {drain_all(tags.iterator())}")

    catalog = ProductCatalog()
    logger.info(f"Custom iterable: {drain_all(catalog.iterator())}")


def show_manual_stepping():
    """Step a finite handle by hand until it reports exhaustion."""
    handle = iterator(["Apple", "Banana", "Cherry"])
    for _ in range(4):
        logger.info(f"step() -> {handle.step()!r}")


def show_coroutines(config: LazySeqConfig):
    """Run the sample coroutines with the configured limits."""
    counter = count_up_to(5)
    logger.info(f"count_up_to(5), first three: {take(counter, 3)} ({counter.status.value})")
    logger.info(f"count_up_to(5), rest: {drain_all(counter)} ({counter.status.value})")

    ids = sequential_ids(config.id_prefix)
    logger.info(f"Generated IDs: {take(ids, config.take_limit)}")

    evens = filter_handle(count_from(1), lambda n: n % 2 == 0)
    squares = map_handle(evens, lambda n: n * n)
    logger.info(f"Squares of even numbers: {take(squares, config.take_limit)}")

    products = to_frame(product_data(config.seed), limit=config.take_limit)
    logger.info(f"Generated test data:\n{products.to_string(index=False)}")

    logger.info(f"Delegation: {drain_all(all_products())}")

    light = TrafficLight()
    logger.info(f"Traffic light: {take(light, 7)}")

    conversation = echo()
    conversation.step()
    for word in ["Hello", "World", "Python"]:
        logger.info(f"step({word!r}) -> {conversation.step(word).value}")

    for group in batch(count_up_to(5), config.batch_size):
        logger.info(f"Batch: {group}")


def compare_memory(config: LazySeqConfig) -> Dict[str, Dict[str, Any]]:
    """Compare taking a few values lazily with building the whole list first."""
    profiler = MemoryProfiler(logger)
    size = 100_000

    lazy = profiler.profile("Lazy take", lambda: take(count_up_to(size), config.take_limit))
    eager = profiler.profile("Eager list", lambda: list(range(1, size + 1))[: config.take_limit])

    logger.info(
        f"Peak memory:\n"
        f"  Lazy:  {format_bytes(lazy['peak_memory'])}\n"
        f"  Eager: {format_bytes(eager['peak_memory'])}"
    )
    return {"lazy": lazy, "eager": eager}


def main():
    """Main execution function."""
    logger.info("Starting lazy sequence walkthrough")
    logger.info("=" * 80)

    try:
        config = get_config()
        setup_logging(config.verbose)

        logger.info(f"Take limit: {config.take_limit}")
        logger.info(f"Batch size: {config.batch_size}")

        logger.info("-" * 80)
        logger.info("STEP 1: Iterable sources")
        logger.info("-" * 80)
        show_sources()

        logger.info("-" * 80)
        logger.info("STEP 2: Manual stepping")
        logger.info("-" * 80)
        show_manual_stepping()

        logger.info("-" * 80)
        logger.info("STEP 3: Coroutines")
        logger.info("-" * 80)
        show_coroutines(config)

        logger.info("-" * 80)
        logger.info("STEP 4: Lazy vs eager memory")
        logger.info("-" * 80)
        compare_memory(config)

        logger.info("Walkthrough completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
