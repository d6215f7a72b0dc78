"""Local configuration for mdviewer."""

from __future__ import annotations

import os


DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "mdviewer/0.1"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_DOCUMENT_BYTES = 5 * 1024 * 1024

MDVIEWER_FETCH_TIMEOUT_S = float(os.getenv("MDVIEWER_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
MDVIEWER_FETCH_MAX_RETRIES = int(os.getenv("MDVIEWER_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
MDVIEWER_FETCH_BACKOFF_S = float(os.getenv("MDVIEWER_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
MDVIEWER_USER_AGENT = os.getenv("MDVIEWER_USER_AGENT", DEFAULT_USER_AGENT)
MDVIEWER_LOG_LEVEL = os.getenv("MDVIEWER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MDVIEWER_MAX_DOCUMENT_BYTES = int(os.getenv("MDVIEWER_MAX_DOCUMENT_BYTES", str(DEFAULT_MAX_DOCUMENT_BYTES)))
