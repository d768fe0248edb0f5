"""
Write one golden Parquet file per column spec.

Files land at <output_dir>/<ENCODING>/<type>.parquet and hold a single
column named 'data', uncompressed and without the embedded Arrow schema
so readers only need to handle the encoding under test. Any failure (directory creation, opening the file,
encoding the column) propagates and stops the run; files already written
are left in place.
"""

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from parquet_golden.config import GenerationOptions
from parquet_golden.properties import COLUMN_NAME, writer_config
from parquet_golden.specs import COLUMN_SPECS, ColumnSpec
from parquet_golden.values import generate_columns, make_rng


def build_table(spec: ColumnSpec, column: pa.Array) -> pa.Table:
    schema = pa.schema([pa.field(COLUMN_NAME, spec.arrow_type)])
    return pa.Table.from_arrays([column], schema=schema)


def write_spec(spec: ColumnSpec, column: pa.Array, options: GenerationOptions) -> Path:
    table = build_table(spec, column)

    output_path = options.output_path(spec.encoding_name, spec.type_name)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    config = writer_config(spec.encoding)
    pq.write_table(
        table,
        output_path,
        row_group_size=options.row_group_size,
        compression='none',
        store_schema=False,
        **config.write_options()
    )

    print(f"Wrote {output_path}")
    return output_path


def write_all(options: GenerationOptions = GenerationOptions(), specs=COLUMN_SPECS) -> list:
    """
    Generate the base columns once and write every spec in order.

    Specs sharing a logical type share the same column, so files of the same
    type hold identical values.
    """
    rng = make_rng(options.seed)
    columns = generate_columns(rng, options.num_rows)

    return [write_spec(spec, columns[spec.logical_type], options) for spec in specs]
