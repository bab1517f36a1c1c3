"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment when the container resolves them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("OBSERVABILITY__SEND_TO_LOGFIRE", "false")

logfire.configure(send_to_logfire=False, console=False)
