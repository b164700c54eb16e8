from .links import build_link, unique_folder_count
from .report import (
    batch_to_frame,
    export_filename,
    format_batch_text,
    write_batch_csv,
    write_batch_text,
)

__all__ = [
    "build_link",
    "unique_folder_count",
    "batch_to_frame",
    "export_filename",
    "format_batch_text",
    "write_batch_csv",
    "write_batch_text",
]
