"""
Maps an encoding choice to Parquet writer options.

Dictionary and explicit encodings are separate selection modes in Parquet:

- PLAIN_DICTIONARY / RLE_DICTIONARY: turn dictionary encoding on and set
  nothing else.
- DELTA_*: turn dictionary encoding off and request the encoding, otherwise
  the dictionary would win and the delta encoding would never be used.
- anything else (PLAIN, RLE): request the encoding and leave the dictionary
  setting at the library default.

With the library default (dictionary on), Arrow's writer dictionary-encodes
the column and only uses the requested encoding after a dictionary fallback.
"""

from dataclasses import dataclass
from typing import Optional

from parquet_golden.specs import DELTA_ENCODINGS, DICTIONARY_ENCODINGS, Encoding

COLUMN_NAME = 'data'


@dataclass(frozen=True)
class WriterConfig:
    # None leaves the writer's default dictionary behaviour untouched
    use_dictionary: Optional[bool]
    encoding: Optional[Encoding]
    column: str = COLUMN_NAME

    def write_options(self) -> dict:
        """Keyword arguments for `pyarrow.parquet.write_table`."""
        options = {'use_dictionary': self.use_dictionary}
        if self.encoding is not None:
            options['column_encoding'] = {self.column: self.encoding.value}
        return options


def writer_config(encoding: Encoding, column: str = COLUMN_NAME) -> WriterConfig:
    if encoding in DICTIONARY_ENCODINGS:
        return WriterConfig(use_dictionary=True, encoding=None, column=column)
    if encoding in DELTA_ENCODINGS:
        return WriterConfig(use_dictionary=False, encoding=encoding, column=column)
    return WriterConfig(use_dictionary=None, encoding=encoding, column=column)
