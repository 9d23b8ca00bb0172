"""Server configuration."""

from __future__ import annotations

import os

from md2slack.config import MD2SLACK_MAX_INPUT_CHARS
from md2slack.options import ConversionOptions

MAX_INPUT_CHARS = MD2SLACK_MAX_INPUT_CHARS
API_TITLE = "md2slack"
API_DESCRIPTION = "Convert Markdown into Slack Block Kit blocks."

HOST = os.getenv("HOST", "0.0.0.0")  # noqa: S104
PORT = int(os.getenv("PORT", "8000"))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Built at import so invalid MD2SLACK_* limits stop the server from starting.
DEFAULT_OPTIONS = ConversionOptions()
