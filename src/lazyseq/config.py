"""Configuration management for the application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class LazySeqConfig:
    """Demo configuration parameters."""

    take_limit: int = 5
    batch_size: int = 2
    id_prefix: str = "TEST"
    seed: int = 42
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "LazySeqConfig":
        """Load configuration from environment variables."""
        return cls(
            take_limit=int(os.getenv("LAZYSEQ_TAKE_LIMIT", "5")),
            batch_size=int(os.getenv("LAZYSEQ_BATCH_SIZE", "2")),
            id_prefix=os.getenv("LAZYSEQ_ID_PREFIX", "TEST"),
            seed=int(os.getenv("LAZYSEQ_SEED", "42")),
            verbose=os.getenv("LAZYSEQ_VERBOSE", "false").lower() == "true",
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.take_limit <= 0:
            raise ValueError("take_limit must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if not self.id_prefix:
            raise ValueError("id_prefix must not be empty")


def get_config() -> LazySeqConfig:
    """Get application configuration."""
    return LazySeqConfig.from_env()
