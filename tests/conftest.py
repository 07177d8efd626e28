"""Test configuration shared by the whole suite.

The environment is prepared before any application module is imported,
since configuration is loaded once at import time.
"""

import os
import tempfile

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DATABASE_CREATE_TABLES"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_FILE"] = ""
os.environ.setdefault("STORAGE_WEB_ROOT", tempfile.mkdtemp(prefix="bookshelf-test-"))

from tests.fixtures import *  # noqa: E402,F401,F403
