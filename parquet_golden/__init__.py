"""Golden Parquet files covering one encoding per file."""

from parquet_golden.config import GenerationOptions
from parquet_golden.properties import WriterConfig, writer_config
from parquet_golden.specs import COLUMN_SPECS, ColumnSpec, Encoding
from parquet_golden.values import LogicalType, generate_column, generate_columns, make_rng
from parquet_golden.writer import build_table, write_all, write_spec

__all__ = [
    'COLUMN_SPECS',
    'ColumnSpec',
    'Encoding',
    'GenerationOptions',
    'LogicalType',
    'WriterConfig',
    'build_table',
    'generate_column',
    'generate_columns',
    'make_rng',
    'write_all',
    'write_spec',
    'writer_config',
]
