"""
Random column generation for the golden files.

Each logical type gets one column of synthetic values. Columns are drawn from
a single explicitly seeded generator, always in GENERATION_ORDER, so a given
seed produces the same values on every run.

Value shapes:
- int32:  uniform in [0, 10000]
- float:  float32, uniform in [0.0, 100.0)
- int64:  a raw 32-bit draw shifted left by 8 bits
- string: 5-10 copies of one letter ('aaaaaa', 'kkkkkkkkk', ...)
- binary: 3-15 uniformly random bytes
"""

from enum import Enum

import numpy as np
import pyarrow as pa


class LogicalType(Enum):
    INT32 = "int32"
    FLOAT = "float"
    INT64 = "int64"
    STRING = "string"
    BINARY = "binary"

    @property
    def arrow_type(self) -> pa.DataType:
        return _ARROW_TYPES[self]


_ARROW_TYPES = {
    LogicalType.INT32: pa.int32(),
    LogicalType.FLOAT: pa.float32(),
    LogicalType.INT64: pa.int64(),
    LogicalType.STRING: pa.utf8(),
    LogicalType.BINARY: pa.binary(),
}

GENERATION_ORDER = (
    LogicalType.INT32,
    LogicalType.FLOAT,
    LogicalType.INT64,
    LogicalType.STRING,
    LogicalType.BINARY,
)

# Raw draws mimic a 32-bit engine's output
RAW_DRAW_LIMIT = 1 << 32
INT64_SHIFT = 8

# Largest float32 strictly below 100.0
_FLOAT_CEILING = np.nextafter(np.float32(100.0), np.float32(0.0))


def make_rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(seed)


def _raw_draws(rng, size):
    return rng.integers(0, RAW_DRAW_LIMIT, size=size, dtype=np.int64)


def _int32_column(rng, num_rows):
    values = rng.integers(0, 10000, size=num_rows, endpoint=True, dtype=np.int32)
    return pa.array(values, type=pa.int32())


def _float_column(rng, num_rows):
    values = rng.random(num_rows, dtype=np.float32) * np.float32(100.0)
    # float32 rounding must not close the interval at 100.0
    return pa.array(np.minimum(values, _FLOAT_CEILING), type=pa.float32())


def _int64_column(rng, num_rows):
    values = _raw_draws(rng, num_rows) << INT64_SHIFT
    return pa.array(values, type=pa.int64())


def _string_column(rng, num_rows):
    lengths = rng.integers(5, 10, size=num_rows, endpoint=True)
    letters = _raw_draws(rng, num_rows) % 26
    values = [
        chr(ord('a') + int(letter)) * int(length)
        for letter, length in zip(letters, lengths)
    ]
    return pa.array(values, type=pa.utf8())


def _binary_column(rng, num_rows):
    lengths = rng.integers(3, 15, size=num_rows, endpoint=True)
    payload = rng.integers(
        0, 255, size=int(lengths.sum()), endpoint=True, dtype=np.uint8
    ).tobytes()
    offsets = np.concatenate(([0], np.cumsum(lengths)))
    values = [payload[start:end] for start, end in zip(offsets[:-1], offsets[1:])]
    return pa.array(values, type=pa.binary())


_GENERATORS = {
    LogicalType.INT32: _int32_column,
    LogicalType.FLOAT: _float_column,
    LogicalType.INT64: _int64_column,
    LogicalType.STRING: _string_column,
    LogicalType.BINARY: _binary_column,
}


def generate_column(rng: np.random.Generator, logical_type, num_rows: int) -> pa.Array:
    """
    Generate one column of `num_rows` values for `logical_type`.

    `logical_type` may be a LogicalType or its string value ("int32", ...).
    Raises ValueError for anything else.
    """
    logical_type = LogicalType(logical_type)
    return _GENERATORS[logical_type](rng, num_rows)


def generate_columns(rng: np.random.Generator, num_rows: int) -> dict:
    """Generate every logical type once, in GENERATION_ORDER."""
    return {
        logical_type: generate_column(rng, logical_type, num_rows)
        for logical_type in GENERATION_ORDER
    }
