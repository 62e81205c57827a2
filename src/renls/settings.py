from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path.cwd() / ".env", override=False)

RENLS_ENCODING = os.getenv("RENLS_ENCODING", "utf-8")
RENLS_COMMENT_PREFIX = os.getenv("RENLS_COMMENT_PREFIX", "#")
