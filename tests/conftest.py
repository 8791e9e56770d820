"""Test configuration and fixtures."""

import os

import logfire

# Must be set before any Settings() is created
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-0123456789abcdef0123456789")
# Fastest bcrypt cost factor
os.environ.setdefault("AUTH__PASSWORD_HASH_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
