from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Must run before any boardapp module reads its configuration.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="boardapp-tests-"))
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'boards-test.db'}"
os.environ["LOG_FILE"] = str(_TMP_DIR / "app.log")
os.environ["ENABLE_RATE_LIMIT"] = "0"
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["JWT_EXPIRES_IN"] = "3600"
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
