# int_fixtures/__init__.py

"""Integer fixture generator package.

Re-exports the table logic for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    about_text,
)

from .logic import (
    WIDTHS,
    EXHAUSTIVE_WIDTHS,
    SAMPLE_WINDOW,
    STYLES,
    HEADER,
    FOOTER,
    int_range_for,
    exhaustive_values,
    sampled_values,
    table_values,
    table_size,
    to_hex_key,
    format_entry,
    render_document,
    check_table_args,
    write_table,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "about_text",
    # Logic
    "WIDTHS", "EXHAUSTIVE_WIDTHS", "SAMPLE_WINDOW", "STYLES", "HEADER", "FOOTER",
    "int_range_for", "exhaustive_values", "sampled_values",
    "table_values", "table_size",
    "to_hex_key", "format_entry", "render_document",
    "check_table_args", "write_table",
]
