"""Course sections and per-section submissions."""

from mcp_servers.servers.canvas.app import anonymizer, get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import (
    LIST_SECTION_SUBMISSIONS_DESCRIPTION,
    LIST_SECTIONS_DESCRIPTION,
)
from mcp_servers.servers.canvas.formatting import format_date, paragraph, render_list, tool_errors
from mcp_servers.servers.canvas.models import Section, Submission
from mcp_servers.servers.canvas.submission_tools import format_submission


def _format_section(section: Section, include_student_count: bool) -> str:
    lines = [
        f"Name: {section.name}",
        f"ID: {section.id}",
        f"SIS ID: {section.sis_section_id or 'N/A'}",
    ]
    if section.start_at:
        lines.append(f"Start Date: {format_date(section.start_at)}")
    if section.end_at:
        lines.append(f"End Date: {format_date(section.end_at)}")
    if include_student_count:
        lines.append(f"Total Students: {section.total_students or 0}")
    if section.restrict_enrollments_to_section_dates:
        lines.append("Restricted to Section Dates: Yes")
    return paragraph(lines)


@mcp.tool(description=LIST_SECTIONS_DESCRIPTION)
@tool_errors("fetch sections")
async def list_sections(course_id: str, include_student_count: bool = False) -> str:
    canvas = get_canvas()
    params = {"include[]": ["total_students"]} if include_student_count else {}
    raw = await canvas.fetch_all(f"/api/v1/courses/{course_id}/sections", params)

    sections = [Section.model_validate(s) for s in raw]
    return render_list(
        f"Sections in course {course_id}:",
        [_format_section(s, include_student_count) for s in sections],
        "No sections found in this course.",
    )


@mcp.tool(description=LIST_SECTION_SUBMISSIONS_DESCRIPTION)
@tool_errors("fetch section submissions")
async def list_section_submissions(
    course_id: str,
    assignment_id: str,
    section_id: str,
    include_comments: bool = True,
    anonymous: bool = True,
) -> str:
    canvas = get_canvas()
    # Fails fast with Canvas' own error if the section is not in this course
    await canvas.fetch(f"/api/v1/courses/{course_id}/sections/{section_id}")

    raw = await canvas.fetch_all(
        f"/api/v1/sections/{section_id}/assignments/{assignment_id}/submissions",
        {"include[]": ["user", "submission_comments", "assignment"]},
    )
    if anonymous:
        raw = anonymizer.transform_submissions(raw)

    submissions = [Submission.model_validate(s) for s in raw]
    return render_list(
        f"Submissions for assignment {assignment_id} in section {section_id}:",
        [format_submission(s, include_comments) for s in submissions],
        "No submissions found for this assignment in this section.",
    )
