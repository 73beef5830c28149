"""Demo entry point: compose several generated streams into one Parquet file."""

import logging
import sys
import time
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .composite import CompositeIterator
from .config import DemoConfig, get_demo_config
from .data_generator import DataGenerator

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


def build_composite(config: DemoConfig, generator: Optional[DataGenerator] = None) -> CompositeIterator[pd.DataFrame]:
    """Register one block stream per configured source.

    Args:
        config: Demo configuration
        generator: Data generator, a seeded default is created when omitted

    Returns:
        A composite iterator that has not been started yet
    """
    generator = generator or DataGenerator()
    composite: CompositeIterator[pd.DataFrame] = CompositeIterator()
    for index in range(config.num_sources):
        composite.register(
            generator.generate_dataframe_blocks(
                f"source-{index + 1}", config.records_per_source, config.block_size
            )
        )
    logger.info(f"Registered {composite.source_count} source(s)")
    return composite


def write_blocks_to_parquet(
    blocks: Iterator[pd.DataFrame], output_path: str, compression: str = "snappy"
) -> dict:
    """Write every DataFrame block to a single Parquet file.

    Args:
        blocks: Iterator of DataFrames sharing one schema
        output_path: Path where the Parquet file will be written
        compression: Compression codec to use

    Returns:
        Dictionary with write statistics

    Raises:
        ValueError: If a block's schema differs from the first block
        RuntimeError: If no non-empty block was produced
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    writer: Optional[pq.ParquetWriter] = None
    schema: Optional[pa.Schema] = None
    num_blocks = 0
    total_rows = 0

    try:
        for df in blocks:
            if df.empty:
                logger.warning("Received empty DataFrame block, skipping...")
                continue

            table = pa.Table.from_pandas(df, preserve_index=False)
            if writer is None:
                schema = table.schema
                writer = pq.ParquetWriter(output_path, schema, compression=compression)
            elif not table.schema.equals(schema):
                raise ValueError(
                    f"DataFrame schema mismatch. Expected {schema}, got {table.schema}"
                )

            writer.write_table(table)
            num_blocks += 1
            total_rows += len(df)
            logger.debug(f"Wrote block {num_blocks}: {len(df):,} rows")
    finally:
        if writer is not None:
            writer.close()

    if writer is None:
        raise RuntimeError("No blocks written. Every source was empty.")

    file_size = Path(output_path).stat().st_size
    return {
        "file_path": output_path,
        "file_size_bytes": file_size,
        "num_rows": total_rows,
        "num_blocks": num_blocks,
        "compression": compression,
    }


def print_summary(stats: dict, num_sources: int, elapsed: float):
    """Print summary statistics."""
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)
    print(f"  Sources composed: {num_sources}")
    print(f"  Blocks written: {stats['num_blocks']}")
    print(f"  Rows written: {stats['num_rows']:,}")
    print(f"  File size: {stats['file_size_bytes'] / (1024 * 1024):.2f} MB")
    print(f"  Compression: {stats['compression']}")
    print(f"  File path: {stats['file_path']}")
    print(f"  Time taken: {elapsed:.2f} seconds")
    print("=" * 80)


def main():
    """Main execution function."""
    logger.info("Starting composite iterator demo")

    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.info(f"Sources: {config.num_sources}")
        logger.info(f"Records per source: {config.records_per_source:,}")
        logger.info(f"Block size: {config.block_size:,}")

        start_time = time.time()
        composite = build_composite(config)
        stats = write_blocks_to_parquet(composite, config.output_path, config.compression)
        elapsed = time.time() - start_time

        print_summary(stats, composite.source_count, elapsed)
        logger.info("Execution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
