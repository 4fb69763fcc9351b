"""Course listing and announcements."""

from mcp_servers.servers.canvas.app import mcp, get_canvas
from mcp_servers.servers.canvas.canvas_descriptions import (
    LIST_COURSES_DESCRIPTION,
    POST_ANNOUNCEMENT_DESCRIPTION,
)
from mcp_servers.servers.canvas.formatting import paragraph, render_list, tool_errors
from mcp_servers.servers.canvas.models import Course


def _format_course(course: Course) -> str:
    term = f" ({course.term.name})" if course.term and course.term.name else ""
    return paragraph(
        [
            f"Course: {course.name}{term}",
            f"ID: {course.id}",
            f"Code: {course.course_code or 'N/A'}",
        ]
    )


@mcp.tool(description=LIST_COURSES_DESCRIPTION)
@tool_errors("fetch courses")
async def list_courses() -> str:
    canvas = get_canvas()
    raw = await canvas.fetch_all(
        "/api/v1/courses",
        {
            "enrollment_state": "active",
            "state[]": ["available"],
            "include[]": ["term"],
        },
    )
    courses = [Course.model_validate(c) for c in raw]
    available = [c for c in courses if c.workflow_state == "available"]

    return render_list(
        "Available Courses:",
        [_format_course(c) for c in available],
        "No active courses found.",
    )


@mcp.tool(description=POST_ANNOUNCEMENT_DESCRIPTION)
@tool_errors("post announcement")
async def post_announcement(course_id: str, title: str, message: str) -> str:
    canvas = get_canvas()
    await canvas.create(
        f"/api/v1/courses/{course_id}/discussion_topics",
        {"title": title, "message": message, "is_announcement": True},
    )
    return f'Successfully posted announcement "{title}" to course {course_id}'
