"""Test environment: in-memory SQLite, cheap bcrypt, fixed JWT secret. Set before any app import."""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-for-production-use-only"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["IDENTITY_FIELD"] = "username"
os.environ["API_PREFIX"] = ""
