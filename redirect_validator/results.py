"""
Append-only CSV sink for verdicts
"""
import csv
from pathlib import Path
from typing import List, Optional, Union

import config
from redirect_validator.errors import OutputError
from redirect_validator.evaluator import Verdict
from redirect_validator.utils import setup_logging

logger = setup_logging(__name__)

class ResultWriter:
    """
    Writes one row per verdict as soon as it is known

    The header row is written only when the file does not exist yet, so
    several runs can append to the same file. Every row is flushed right
    away so a crash mid-run keeps the rows already computed.
    """

    def __init__(self, path: Union[str, Path] = config.RESULT_CSV, header: Optional[List[str]] = None):
        self.path = Path(path)
        self.header = header or config.CSV_HEADER
        self.rows_written = 0

    def _write(self, rows: List[List[str]]):
        try:
            write_header = not self.path.exists()
            with open(self.path, 'a', newline='', encoding='utf-8') as f:
                writer = csv.writer(f, delimiter=',')
                if write_header:
                    writer.writerow(self.header)
                    logger.debug(f"Created result file {self.path}")
                writer.writerows(rows)
                f.flush()
        except OSError as e:
            raise OutputError(f"Cannot write results to {self.path}: {e}") from e

    def append(self, verdict: Verdict):
        """
        Append a verdict row

        Args:
            verdict: Verdict to record

        Raises:
            OutputError: the file could not be written
        """
        self._write([verdict.as_row()])
        self.rows_written += 1

    def ensure_header(self):
        """Create the file with its header if it is missing"""
        self._write([])
