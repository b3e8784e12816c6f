"""Console presentation helpers."""

from jswasm_fetch.ui.display import (
    display_extracted_files,
    display_release_info,
    display_wasm_assets,
    format_published,
    format_size_kb,
)

__all__ = [
    "display_extracted_files",
    "display_release_info",
    "display_wasm_assets",
    "format_published",
    "format_size_kb",
]
