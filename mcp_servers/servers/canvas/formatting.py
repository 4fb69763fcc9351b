"""
Shared report helpers for the Canvas tools.

Every list-style tool renders the same way: a heading, one paragraph per
record (fields on separate lines), paragraphs separated by a "---" line, and
a "Total: N" footer. An empty result is reported with an explicit sentence
instead of an empty block.

tool_errors() is the single place where failures are turned into the
"Error: ..." text the LLM sees.
"""

import functools
import json
import sys
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

SEPARATOR = "\n---\n"


def render_list(
    heading: str,
    paragraphs: Iterable[str],
    empty_message: str,
    show_total: bool = True,
) -> str:
    """Join pre-formatted record paragraphs into one report."""
    paragraphs = list(paragraphs)
    if not paragraphs:
        return empty_message

    report = f"{heading}\n\n{SEPARATOR.join(paragraphs)}"
    if show_total:
        report += f"\n\nTotal: {len(paragraphs)}"
    return report


def paragraph(lines: Iterable[Optional[str]]) -> str:
    """Join the non-empty lines of one record."""
    return "\n".join(line for line in lines if line)


def to_json(data: Any) -> str:
    """Structured echo of a raw Canvas response."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def without_none(**fields) -> Dict[str, Any]:
    """Request body fields the caller actually set."""
    return {key: value for key, value in fields.items() if value is not None}


def yes_no(value: Optional[bool]) -> str:
    return "Yes" if value else "No"


def format_timestamp(value: Optional[str], default: str = "N/A") -> str:
    """Render a Canvas ISO-8601 timestamp as ``YYYY-MM-DD HH:MM UTC``."""
    if not value:
        return default
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime("%Y-%m-%d %H:%M UTC")


def format_date(value: Optional[str], default: str = "N/A") -> str:
    """Render only the date part of a Canvas timestamp."""
    if not value:
        return default
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime("%Y-%m-%d")


def format_number(value: Optional[float], default: str = "N/A") -> str:
    """Drop a trailing ``.0`` so whole scores print as integers."""
    if value is None:
        return default
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def tool_errors(operation: str) -> Callable:
    """
    Decorator for tool handlers.

    Any exception escaping the handler is logged to stderr and returned as
    ``"Error: Failed to <operation>: <message>"``. Handlers therefore never
    leak a raw exception to the client, and a failed pagination run yields
    only the error, never a partial report.
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except Exception as e:
                message = str(e) or "Unknown error"
                print(f"[CANVAS] ERROR: Failed to {operation}: {message}", file=sys.stderr)
                return f"Error: Failed to {operation}: {message}"

        return wrapper

    return decorator


def lines_for_comments(comments: List[Any], indent: str = "  ") -> List[str]:
    """Render submission comments as ``[time] author (role):`` + text."""
    lines = []
    for comment in comments:
        author = comment.author
        name = (author.display_name if author else None) or comment.author_name or "Unknown"
        role = (author.role if author else None) or "unknown role"
        lines.append(f"{indent}[{format_timestamp(comment.created_at)}] {name} ({role}):")
        lines.append(f"{indent}  {comment.comment or ''}")
    return lines
