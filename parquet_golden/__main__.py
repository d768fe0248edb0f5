#!/usr/bin/env python3
"""
Generate the golden Parquet files.

Usage:
    python -m parquet_golden
    generate-golden-files

Writes data/<ENCODING>/<type>.parquet under the current directory.
"""

from parquet_golden.writer import write_all


def main():
    write_all()


if __name__ == "__main__":
    main()
