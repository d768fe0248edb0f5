"""Options for a generation run. The defaults are the reference run."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationOptions:
    seed: int = 42
    num_rows: int = 1000
    row_group_size: int = 1024
    output_dir: Path = Path('data')
    extension: str = 'parquet'

    def output_path(self, encoding_name: str, type_name: str) -> Path:
        return Path(self.output_dir) / encoding_name / f"{type_name}.{self.extension}"
