"""Data loading utilities for humanizex."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)


def load_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Load a plain-text document.

    Args:
        path: Path to the file, or "-" to read standard input.
        encoding: File encoding.

    Returns:
        The document text.

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    if str(path) == "-":
        return sys.stdin.read()

    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    text = path.read_text(encoding=encoding)

    logger.info(f"Loaded {len(text)} characters from {path.name}")

    return text


def _validate_columns(
    df: pd.DataFrame,
    text_column: str,
    id_column: Optional[str],
    label: str = "column",
) -> None:
    if text_column not in df.columns:
        raise ValueError(
            f"Text {label} '{text_column}' not found. "
            f"Available {label}s: {list(df.columns)}"
        )

    if id_column and id_column not in df.columns:
        raise ValueError(
            f"ID {label} '{id_column}' not found. "
            f"Available {label}s: {list(df.columns)}"
        )


def load_csv(
    path: Union[str, Path],
    text_column: str,
    id_column: Optional[str] = None,
    encoding: str = "utf-8",
    **kwargs,
) -> pd.DataFrame:
    """
    Load a CSV file of documents.

    Args:
        path: Path to CSV file.
        text_column: Name of column containing text.
        id_column: Optional name of ID column.
        encoding: File encoding.
        **kwargs: Additional arguments passed to pd.read_csv.

    Returns:
        DataFrame with validated columns.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If required columns are missing.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    df = pd.read_csv(path, encoding=encoding, **kwargs)
    _validate_columns(df, text_column, id_column)

    logger.info(f"Loaded {len(df)} rows from {path.name}")

    return df


def load_excel(
    path: Union[str, Path],
    text_column: str,
    id_column: Optional[str] = None,
    sheet_name: Union[str, int] = 0,
    **kwargs,
) -> pd.DataFrame:
    """
    Load an Excel file of documents.

    Args:
        path: Path to Excel file.
        text_column: Name of column containing text.
        id_column: Optional name of ID column.
        sheet_name: Sheet name or index.
        **kwargs: Additional arguments passed to pd.read_excel.

    Returns:
        DataFrame with validated columns.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    df = pd.read_excel(path, sheet_name=sheet_name, **kwargs)
    _validate_columns(df, text_column, id_column)

    logger.info(f"Loaded {len(df)} rows from {path.name}")

    return df


def load_json(
    path: Union[str, Path],
    text_column: str,
    id_column: Optional[str] = None,
    **kwargs,
) -> pd.DataFrame:
    """
    Load a JSON file of documents.

    Args:
        path: Path to JSON file.
        text_column: Name of field containing text.
        id_column: Optional name of ID field.
        **kwargs: Additional arguments passed to pd.read_json.

    Returns:
        DataFrame with validated columns.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    df = pd.read_json(path, **kwargs)
    _validate_columns(df, text_column, id_column, label="field")

    logger.info(f"Loaded {len(df)} records from {path.name}")

    return df


def load_data(
    path: Union[str, Path],
    text_column: str,
    id_column: Optional[str] = None,
    **kwargs,
) -> pd.DataFrame:
    """
    Load a table of documents, auto-detecting format.

    Supports CSV, Excel (.xlsx, .xls), and JSON files.

    Args:
        path: Path to data file.
        text_column: Name of column/field containing text.
        id_column: Optional name of ID column/field.
        **kwargs: Additional arguments passed to format-specific loader.

    Returns:
        DataFrame with validated columns.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        return load_csv(path, text_column, id_column, **kwargs)
    elif suffix in [".xlsx", ".xls"]:
        return load_excel(path, text_column, id_column, **kwargs)
    elif suffix == ".json":
        return load_json(path, text_column, id_column, **kwargs)
    else:
        raise ValueError(
            f"Unsupported file format: {suffix}. "
            "Supported formats: .csv, .xlsx, .xls, .json"
        )


def load_texts(
    path: Union[str, Path],
    text_column: str,
    id_column: Optional[str] = None,
    **kwargs,
) -> tuple[list[str], list]:
    """
    Load a table and extract documents and IDs.

    Args:
        path: Path to data file.
        text_column: Name of column containing text.
        id_column: Optional name of ID column.
        **kwargs: Additional arguments passed to loader.

    Returns:
        Tuple of (texts list, ids list).
    """
    df = load_data(path, text_column, id_column, **kwargs)
    return extract_texts(df, text_column, id_column)


def extract_texts(
    df: pd.DataFrame,
    text_column: str,
    id_column: Optional[str] = None,
) -> tuple[list[str], list]:
    """
    Extract documents and IDs from a DataFrame.

    Missing documents become empty strings. Without an ID column the row
    positions are used as IDs.

    Raises:
        ValueError: If a column is missing.
    """
    _validate_columns(df, text_column, id_column)

    texts = df[text_column].fillna("").astype(str).tolist()

    if id_column:
        ids = df[id_column].tolist()
    else:
        ids = list(range(len(texts)))

    return texts, ids
