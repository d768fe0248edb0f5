"""
The (encoding, logical type) pairs to write, one golden file each.

Delta encodings only appear with the physical types they are defined for:
DELTA_BINARY_PACKED with integers, DELTA_LENGTH_BYTE_ARRAY with byte arrays.
"""

from dataclasses import dataclass
from enum import Enum

import pyarrow as pa

from parquet_golden.values import LogicalType


class Encoding(Enum):
    PLAIN = "PLAIN"
    PLAIN_DICTIONARY = "PLAIN_DICTIONARY"
    RLE_DICTIONARY = "RLE_DICTIONARY"
    RLE = "RLE"
    DELTA_BINARY_PACKED = "DELTA_BINARY_PACKED"
    DELTA_LENGTH_BYTE_ARRAY = "DELTA_LENGTH_BYTE_ARRAY"


DICTIONARY_ENCODINGS = frozenset({Encoding.PLAIN_DICTIONARY, Encoding.RLE_DICTIONARY})
DELTA_ENCODINGS = frozenset({Encoding.DELTA_BINARY_PACKED, Encoding.DELTA_LENGTH_BYTE_ARRAY})


@dataclass(frozen=True)
class ColumnSpec:
    encoding: Encoding
    logical_type: LogicalType

    @property
    def encoding_name(self) -> str:
        return self.encoding.value

    @property
    def type_name(self) -> str:
        return self.logical_type.value

    @property
    def arrow_type(self) -> pa.DataType:
        return self.logical_type.arrow_type


_STRING = LogicalType.STRING
_FLOAT = LogicalType.FLOAT
_INT32 = LogicalType.INT32
_INT64 = LogicalType.INT64
_BINARY = LogicalType.BINARY

COLUMN_SPECS = (
    # PLAIN
    ColumnSpec(Encoding.PLAIN, _STRING),
    ColumnSpec(Encoding.PLAIN, _FLOAT),
    ColumnSpec(Encoding.PLAIN, _INT32),
    ColumnSpec(Encoding.PLAIN, _BINARY),

    # PLAIN_DICTIONARY
    ColumnSpec(Encoding.PLAIN_DICTIONARY, _STRING),
    ColumnSpec(Encoding.PLAIN_DICTIONARY, _FLOAT),
    ColumnSpec(Encoding.PLAIN_DICTIONARY, _INT32),
    ColumnSpec(Encoding.PLAIN_DICTIONARY, _INT64),
    ColumnSpec(Encoding.PLAIN_DICTIONARY, _BINARY),

    # RLE_DICTIONARY
    ColumnSpec(Encoding.RLE_DICTIONARY, _STRING),
    ColumnSpec(Encoding.RLE_DICTIONARY, _FLOAT),
    ColumnSpec(Encoding.RLE_DICTIONARY, _INT32),
    ColumnSpec(Encoding.RLE_DICTIONARY, _INT64),
    ColumnSpec(Encoding.RLE_DICTIONARY, _BINARY),

    # RLE
    ColumnSpec(Encoding.RLE, _STRING),
    ColumnSpec(Encoding.RLE, _FLOAT),
    ColumnSpec(Encoding.RLE, _INT32),
    ColumnSpec(Encoding.RLE, _INT64),
    ColumnSpec(Encoding.RLE, _BINARY),

    # DELTA_BINARY_PACKED (integer types only)
    ColumnSpec(Encoding.DELTA_BINARY_PACKED, _INT32),
    ColumnSpec(Encoding.DELTA_BINARY_PACKED, _INT64),

    # DELTA_LENGTH_BYTE_ARRAY (binary only)
    ColumnSpec(Encoding.DELTA_LENGTH_BYTE_ARRAY, _BINARY),
)
