"""Configuration for the repoclone package."""

from __future__ import annotations

import os

GIT_EXECUTABLE: str = os.getenv("REPOCLONE_GIT_EXECUTABLE", "git")
LOG_LEVEL: str = os.getenv("REPOCLONE_LOG_LEVEL", "WARNING")

# Never let git block on an interactive credential prompt
GIT_TERMINAL_PROMPT: str = "0"

EMPTY_OUTPUT_MESSAGE: str = "git clone failed without producing any output"
REDACTED: str = "***"
