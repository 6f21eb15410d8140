"""Root conftest — shared test configuration."""

import os

# Ensure tests use the built-in catalog and readable logs
os.environ.setdefault("CATALOG_FILE", "")
os.environ.setdefault("LOG_FORMAT", "text")
