"""Core pipeline components: fetch, select, download, extract."""
