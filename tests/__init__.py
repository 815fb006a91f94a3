"""Test package. Points the app at in-memory SQLite before anything imports settings."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "dev"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes!"
os.environ["TOOLS_PER_PAGE"] = "12"
