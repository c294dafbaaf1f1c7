"""Tabular artifact writers for deposit exports."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Sequence

import pandas as pd

from deposit_report.models import ReportedDeposit
from .columns import ColumnAccessor, build_rows

logger = logging.getLogger(__name__)

EXCEL_FILENAME = "deposits.xlsx"
CSV_FILENAME = "deposits.csv"
SHEET_NAME = "Deposits"


class ArtifactWriter(ABC):
    """Serializes an ordered record sequence into a single downloadable file."""

    @abstractmethod
    def write(
        self,
        records: Sequence[ReportedDeposit],
        columns: Mapping[str, ColumnAccessor],
    ) -> Path:
        """
        Write the records using the given column mapping.
        
        Args:
            records: Records in export order
            columns: Ordered mapping of column label to field accessor
            
        Returns:
            Path of the written file
        """
        pass


class _DataFrameWriter(ArtifactWriter):
    """Shared DataFrame construction for the pandas based writers."""

    filename: str

    def __init__(self, output_dir: str | os.PathLike):
        self.output_dir = Path(output_dir)

    @property
    def path(self) -> Path:
        return self.output_dir / self.filename

    def _frame(
        self,
        records: Sequence[ReportedDeposit],
        columns: Mapping[str, ColumnAccessor],
    ) -> pd.DataFrame:
        # Explicit column list keeps headers even when there are no rows
        return pd.DataFrame(build_rows(records, columns), columns=list(columns))

    def write(
        self,
        records: Sequence[ReportedDeposit],
        columns: Mapping[str, ColumnAccessor],
    ) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        df = self._frame(records, columns)
        self._save(df, self.path)
        logger.info(f"Wrote {len(df)} deposits to {self.path}")
        return self.path

    @abstractmethod
    def _save(self, df: pd.DataFrame, path: Path) -> None:
        pass


class ExcelArtifactWriter(_DataFrameWriter):
    """Writes a single-sheet .xlsx workbook."""

    filename = EXCEL_FILENAME

    def __init__(self, output_dir: str | os.PathLike, sheet_name: str = SHEET_NAME):
        super().__init__(output_dir)
        self.sheet_name = sheet_name

    def _save(self, df: pd.DataFrame, path: Path) -> None:
        df.to_excel(path, sheet_name=self.sheet_name, index=False, engine="openpyxl")


class CsvArtifactWriter(_DataFrameWriter):
    """Writes a UTF-8 CSV file."""

    filename = CSV_FILENAME

    def _save(self, df: pd.DataFrame, path: Path) -> None:
        df.to_csv(path, index=False)
