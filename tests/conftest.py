"""Test environment: in-memory SQLite, throwaway upload dir and env file, fixed JWT secret.

Set before any portfolio module is imported, since settings are read at import time.
"""

import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="portfolio-tests-")

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["ENV_FILE_PATH"] = os.path.join(_TMP, "app.env")
os.environ.pop("GITHUB_TOKEN", None)
