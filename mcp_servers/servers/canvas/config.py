"""
Canvas server configuration.

Centralizes the environment values the Canvas MCP server needs at startup.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Load environment variables from .env file
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# Canvas credentials. Both are required; server.main() refuses to start without them.
CANVAS_API_TOKEN = os.environ.get("CANVAS_API_TOKEN", "")
CANVAS_BASE_URL = os.environ.get("CANVAS_BASE_URL", "").rstrip("/")

# Seconds before an upstream request gives up
CANVAS_TIMEOUT = float(os.environ.get("CANVAS_TIMEOUT", "30"))

# Pagination
DEFAULT_PER_PAGE = 100

# Page slug used by the styleguide tools
STYLEGUIDE_PAGE_URL = "canvas-styleguide"
STYLEGUIDE_TITLE = "Canvas Course Styleguide"


def missing_settings() -> list:
    """Return the names of required settings that are not configured."""
    missing = []
    if not CANVAS_API_TOKEN:
        missing.append("CANVAS_API_TOKEN")
    if not CANVAS_BASE_URL:
        missing.append("CANVAS_BASE_URL")
    return missing
