"""Tests for data_generator module."""

import pytest

from composite_iterator.data_generator import DataGenerator


def test_data_generator_initialization():
    """Test that DataGenerator can be initialized."""
    generator = DataGenerator(seed=42)
    assert generator.faker is not None


def test_generate_records():
    """Test generating records tagged with their source."""
    generator = DataGenerator(seed=42)

    data = generator.generate_records(10, "alpha", start_id=5)

    assert data["id"] == list(range(5, 15))
    assert data["source"] == ["alpha"] * 10
    assert len(data["name"]) == 10
    assert all(isinstance(email, str) for email in data["email"])


def test_generate_dataframe_blocks():
    """Test that blocks cover every record exactly once."""
    generator = DataGenerator(seed=42)

    blocks = list(generator.generate_dataframe_blocks("alpha", 25, 10))

    assert [len(block) for block in blocks] == [10, 10, 5]
    assert [block["id"].iloc[0] for block in blocks] == [0, 10, 20]
    assert all((block["source"] == "alpha").all() for block in blocks)


def test_generate_no_blocks_for_zero_records():
    """Test that an empty source yields nothing."""
    generator = DataGenerator(seed=42)

    assert list(generator.generate_dataframe_blocks("empty", 0, 10)) == []


def test_invalid_block_size():
    """Test that a non-positive block size is rejected on first pull."""
    generator = DataGenerator(seed=42)
    blocks = generator.generate_dataframe_blocks("alpha", 10, 0)

    with pytest.raises(ValueError, match="block_size must be positive"):
        next(blocks)
