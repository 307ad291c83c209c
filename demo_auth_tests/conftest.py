"""
Pytest configuration for the auth service tests.

Points the service at a throwaway SQLite file and log directory before
any application module reads its settings.
"""
import os
import tempfile

_tmp_dir = tempfile.mkdtemp(prefix="demo_auth_tests_")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_tmp_dir, 'test.db')}")
os.environ.setdefault("LOG_DIR", os.path.join(_tmp_dir, "logs"))
