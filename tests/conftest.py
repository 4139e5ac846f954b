"""Test environment: settings must validate before any app module is imported."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("SYSTEM_USER_ID", "1")
