"""
Canvas LMS MCP Server.

Exposes Canvas courses, students, submissions, assignments, modules, pages,
quizzes and rubrics as MCP tools. Student identities are replaced with
stable pseudonyms by default before anything reaches the LLM.

Authentication uses a Canvas API access token:

  1. Log into your Canvas instance
  2. Account -> Settings -> Approved Integrations -> "+ New Access Token"
  3. Put the token and instance URL in the project .env file:

       CANVAS_API_TOKEN=...
       CANVAS_BASE_URL=https://your-university.instructure.com

Run with:  python mcp_servers/servers/canvas/server.py
"""

import sys

from mcp_servers.servers.canvas import config
from mcp_servers.servers.canvas.app import mcp

# Importing the tool modules registers their tools on `mcp`
from mcp_servers.servers.canvas import (  # noqa: F401
    assignment_tools,
    course_tools,
    module_tools,
    page_tools,
    prompts,
    quiz_tools,
    rubric_tools,
    section_tools,
    student_tools,
    submission_tools,
)


def main():
    missing = config.missing_settings()
    if missing:
        print(
            f"[CANVAS] ERROR: Missing required settings: {', '.join(missing)}. "
            "Set them in the environment or .env file.",
            file=sys.stderr,
        )
        sys.exit(1)

    print(f"[CANVAS] Starting Canvas MCP server for {config.CANVAS_BASE_URL}", file=sys.stderr)
    mcp.run()


if __name__ == "__main__":
    main()
