"""Root conftest: shared test configuration."""

import os

# Keep test output readable and never pick up a developer's .env overrides
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
