"""Root conftest: shared test configuration."""

import os

# Tests never pick up a developer's .env overrides for logging
os.environ.setdefault("COINS_LOG_LEVEL", "WARNING")
os.environ.setdefault("COINS_LOG_FORMAT", "text")
