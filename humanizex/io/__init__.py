"""Input/output utilities for loading documents and exporting results."""

from humanizex.io.loaders import (
    load_text_file,
    load_csv,
    load_excel,
    load_json,
    load_data,
    load_texts,
    extract_texts,
)
from humanizex.io.exporters import (
    export_result_json,
    export_segments_csv,
    export_batch_csv,
)

__all__ = [
    # Loaders
    "load_text_file",
    "load_csv",
    "load_excel",
    "load_json",
    "load_data",
    "load_texts",
    "extract_texts",
    # Exporters
    "export_result_json",
    "export_segments_csv",
    "export_batch_csv",
]
