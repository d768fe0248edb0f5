"""Tests for random column generation."""

import numpy as np
import pyarrow as pa
import pytest

from parquet_golden.values import (
    GENERATION_ORDER, LogicalType, generate_column, generate_columns, make_rng
)


class TestLogicalType:
    """Tests for the LogicalType enum."""

    def test_arrow_types(self):
        assert LogicalType.INT32.arrow_type == pa.int32()
        assert LogicalType.FLOAT.arrow_type == pa.float32()
        assert LogicalType.INT64.arrow_type == pa.int64()
        assert LogicalType.STRING.arrow_type == pa.utf8()
        assert LogicalType.BINARY.arrow_type == pa.binary()

    def test_generation_order(self):
        assert [t.value for t in GENERATION_ORDER] == ['int32', 'float', 'int64', 'string', 'binary']


class TestColumnShapes:
    """Each column has the right type, length and value range."""

    def test_every_column_has_num_rows(self, columns):
        for logical_type, column in columns.items():
            assert len(column) == 1000
            assert column.type == logical_type.arrow_type
            assert column.null_count == 0

    def test_int32_range(self, columns):
        values = columns[LogicalType.INT32].to_numpy()
        assert values.min() >= 0
        assert values.max() <= 10000

    def test_float_range(self, columns):
        values = columns[LogicalType.FLOAT].to_numpy()
        assert values.dtype == np.float32
        assert values.min() >= 0.0
        assert values.max() < 100.0

    def test_int64_is_shifted_32_bit_draw(self, columns):
        values = columns[LogicalType.INT64].to_numpy()
        assert values.min() >= 0
        assert values.max() < 1 << 40
        assert np.all(values % 256 == 0)

    def test_strings_repeat_one_letter(self, columns):
        for value in columns[LogicalType.STRING].to_pylist():
            assert 5 <= len(value) <= 10
            assert len(set(value)) == 1
            assert 'a' <= value[0] <= 'z'

    def test_strings_use_several_letters(self, columns):
        letters = {value[0] for value in columns[LogicalType.STRING].to_pylist()}
        assert len(letters) > 1

    def test_binary_lengths(self, columns):
        lengths = [len(value) for value in columns[LogicalType.BINARY].to_pylist()]
        assert min(lengths) >= 3
        assert max(lengths) <= 15


class TestDeterminism:
    """Columns depend only on the seed."""

    def test_same_seed_same_columns(self, columns):
        again = generate_columns(make_rng(42), 1000)
        for logical_type in GENERATION_ORDER:
            assert columns[logical_type].equals(again[logical_type])

    def test_different_seed_differs(self, columns):
        other = generate_columns(make_rng(7), 1000)
        assert not columns[LogicalType.INT32].equals(other[LogicalType.INT32])

    def test_columns_generated_in_order(self, columns):
        assert list(columns) == list(GENERATION_ORDER)


class TestGenerateColumn:
    """Tests for single-column dispatch."""

    def test_accepts_type_name(self):
        column = generate_column(make_rng(1), 'int64', 10)
        assert column.type == pa.int64()
        assert len(column) == 10

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            generate_column(make_rng(1), 'double', 10)

    def test_zero_rows(self):
        assert len(generate_column(make_rng(1), LogicalType.BINARY, 0)) == 0
