"""Course roster."""

from mcp_servers.servers.canvas.app import anonymizer, get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import LIST_STUDENTS_DESCRIPTION
from mcp_servers.servers.canvas.formatting import paragraph, render_list, tool_errors
from mcp_servers.servers.canvas.models import User


def _format_student(student: User, include_email: bool) -> str:
    lines = [
        f"Name: {student.name}",
        f"ID: {student.id}",
        f"SIS ID: {student.sis_user_id or 'N/A'}",
        f"Avatar URL: {student.avatar_url or 'N/A'}",
    ]
    if include_email and student.email:
        lines.append(f"Email: {student.email}")
    return paragraph(lines)


@mcp.tool(description=LIST_STUDENTS_DESCRIPTION)
@tool_errors("fetch students")
async def list_students(
    course_id: str,
    include_email: bool = False,
    anonymous: bool = True,
) -> str:
    canvas = get_canvas()
    raw = await canvas.fetch_all(
        f"/api/v1/courses/{course_id}/users",
        {
            "enrollment_type[]": ["student"],
            "enrollment_state[]": ["active", "invited"],
            "include[]": ["email", "avatar_url"],
        },
    )
    if anonymous:
        raw = anonymizer.transform_users(raw)

    students = [User.model_validate(s) for s in raw]
    return render_list(
        f"Students in course {course_id}:",
        [_format_student(s, include_email) for s in students],
        "No students found in this course.",
    )
