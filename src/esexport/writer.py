"""Consumer that appends exported hits to a delimited text file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from esexport._utils.formatting import records_to_dataframe
from esexport.response import Hit

logger = logging.getLogger(__name__)


class ColumnWriter:
    """
    Append selected source fields of every hit to a file.
    
    One line per hit, tab-separated; files ending in .csv get commas
    instead. The file is opened in append mode, so re-running an
    export adds to previous output.
    
    Write failures are logged and the batch is dropped; they never
    propagate into the walk.
    
    Example:
        with ColumnWriter("out.txt", ["sid", "ts"]) as writer:
            client.walk(writer)
        print(writer.rows_written)
    """
    
    def __init__(self, path: str | Path, columns: Sequence[str]):
        self.path = Path(path)
        self.columns = list(columns)
        self.separator = "," if self.path.suffix == ".csv" else "\t"
        self.rows_written = 0
        self._fd = None
    
    def __enter__(self) -> "ColumnWriter":
        self.open()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
    
    def open(self) -> None:
        if self._fd is None:
            self._fd = self.path.open("a", encoding="utf-8", newline="")
    
    def close(self) -> None:
        if self._fd is not None:
            self._fd.close()
            self._fd = None
    
    def __call__(self, batch: list[Hit]) -> None:
        if not batch or not self.columns:
            return
        try:
            self.open()
            df = records_to_dataframe(batch, self.columns)
            df.to_csv(
                self._fd,
                sep=self.separator,
                header=False,
                index=False,
                lineterminator="\n",
            )
            self._fd.flush()
        except (OSError, ValueError) as e:
            logger.error("write to file %s error: %s", self.path, e)
            return
        self.rows_written += len(df)
