from .columns import DEPOSIT_COLUMNS, build_rows, format_percentage
from .writers import ArtifactWriter, CsvArtifactWriter, ExcelArtifactWriter

__all__ = [
    "DEPOSIT_COLUMNS",
    "build_rows",
    "format_percentage",
    "ArtifactWriter",
    "CsvArtifactWriter",
    "ExcelArtifactWriter",
]
