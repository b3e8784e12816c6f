"""jswasm-fetch: download the latest SQLite WASM build from GitHub."""

__version__ = "0.3.0"

__all__ = ["__version__"]
