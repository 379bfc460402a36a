"""
tests/conftest.py — Shared pytest setup.

Keeps the JSONL logger off disk for the whole session so importing modules
that grab the logger at import time does not create ``logs/``.
"""

from __future__ import annotations

from core import logger as log_setup

log_setup.configure(enabled=False)
