"""Pytest fixtures for golden file tests."""

import pytest

from parquet_golden.config import GenerationOptions
from parquet_golden.values import generate_columns, make_rng


@pytest.fixture
def seed():
    return 42


@pytest.fixture
def columns(seed):
    """Base columns for the reference run."""
    return generate_columns(make_rng(seed), 1000)


@pytest.fixture
def options(tmp_path):
    """Reference options writing under a temporary directory."""
    return GenerationOptions(output_dir=tmp_path / 'data')
