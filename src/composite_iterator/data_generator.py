"""Generate fake record blocks to feed a composite iterator."""

import logging
from typing import Dict, Generator, List

import pandas as pd
from faker import Faker

logger = logging.getLogger(__name__)


class DataGenerator:
    """Generate fake customer records as DataFrame blocks."""

    def __init__(self, seed: int = 42):
        """Initialize the data generator.

        Args:
            seed: Random seed for reproducibility
        """
        self.faker = Faker()
        Faker.seed(seed)

    def generate_records(self, num_records: int, source_name: str, start_id: int = 0) -> Dict[str, List]:
        """Generate fake records tagged with the source that produced them.

        Args:
            num_records: Number of records to generate
            source_name: Value stored in the "source" column
            start_id: First record id

        Returns:
            Dictionary with column names as keys and lists of values
        """
        data: Dict[str, List] = {
            "id": [],
            "source": [],
            "name": [],
            "email": [],
            "city": [],
            "country": [],
            "company": [],
        }

        for i in range(num_records):
            data["id"].append(start_id + i)
            data["source"].append(source_name)
            data["name"].append(self.faker.name())
            data["email"].append(self.faker.email())
            data["city"].append(self.faker.city())
            data["country"].append(self.faker.country())
            data["company"].append(self.faker.company())

        return data

    def generate_dataframe_blocks(
        self, source_name: str, total_records: int, block_size: int
    ) -> Generator[pd.DataFrame, None, None]:
        """Yield DataFrame blocks for one source, one block at a time.

        Args:
            source_name: Name tagged onto every record of this source
            total_records: Total number of records to generate
            block_size: Number of records per block

        Yields:
            pandas DataFrame blocks
        """
        if block_size <= 0:
            raise ValueError("block_size must be positive")

        num_blocks = (total_records + block_size - 1) // block_size
        logger.info(
            f"Source {source_name}: {total_records:,} records in {num_blocks} block(s)"
        )

        current_id = 0
        for block_num in range(num_blocks):
            records_in_block = min(block_size, total_records - current_id)
            logger.debug(
                f"Source {source_name}: generating block {block_num + 1}/{num_blocks} "
                f"({records_in_block:,} records)"
            )
            data = self.generate_records(records_in_block, source_name, current_id)
            current_id += records_in_block
            yield pd.DataFrame(data)
