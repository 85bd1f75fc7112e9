"""Root conftest — shared test configuration."""

import os

# Keep test output readable and never pick up a developer's dataset override
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.pop("CITY_DATASET_PATH", None)
