"""Configuration management for the composite iterator demo."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class DemoConfig:
    """Demo configuration parameters."""

    num_sources: int = 3
    records_per_source: int = 1000
    block_size: int = 250
    output_path: str = "output/composite.parquet"
    compression: str = "snappy"
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.num_sources < 0:
            raise ValueError("num_sources must not be negative")
        if self.records_per_source < 0:
            raise ValueError("records_per_source must not be negative")
        if self.block_size <= 0:
            raise ValueError("block_size must be positive")

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load demo configuration from environment variables."""
        return cls(
            num_sources=int(os.getenv("NUM_SOURCES", "3")),
            records_per_source=int(os.getenv("RECORDS_PER_SOURCE", "1000")),
            block_size=int(os.getenv("BLOCK_SIZE", "250")),
            output_path=os.getenv("OUTPUT_PATH", "output/composite.parquet"),
            compression=os.getenv("COMPRESSION", "snappy"),
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )


def get_demo_config() -> DemoConfig:
    """Get demo configuration."""
    return DemoConfig.from_env()
