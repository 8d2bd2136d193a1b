"""Test package. Pins settings that must be in place before app modules are imported."""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_AUTO_CREATE", "false")
os.environ.setdefault("MAIL_BACKEND", "console")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("VERIFICATION_TTL_SECONDS", "180")
os.environ.setdefault("SESSION_TTL_SECONDS", "3600")
