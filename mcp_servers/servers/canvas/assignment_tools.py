"""
Assignment and assignment-group tools.

list_assignments is the only report-style tool here; the rest echo the
Canvas response as JSON so the LLM sees every field.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from mcp_servers.servers.canvas.app import anonymizer, get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import (
    BULK_UPDATE_ASSIGNMENT_DATES_DESCRIPTION,
    CREATE_ASSIGNMENT_DESCRIPTION,
    CREATE_ASSIGNMENT_GROUP_DESCRIPTION,
    DELETE_ASSIGNMENT_DESCRIPTION,
    GET_ASSIGNMENT_DESCRIPTION,
    LIST_ASSIGNMENT_GROUPS_DESCRIPTION,
    LIST_ASSIGNMENTS_DESCRIPTION,
    UPDATE_ASSIGNMENT_DESCRIPTION,
)
from mcp_servers.servers.canvas.formatting import (
    format_number,
    format_timestamp,
    paragraph,
    render_list,
    to_json,
    tool_errors,
    without_none,
)
from mcp_servers.servers.canvas.models import Assignment, Submission

TEACHER_ROLE = "teacher"


class AssignmentDates(BaseModel):
    """One entry of a bulk date update."""

    assignment_id: str
    due_at: Optional[str] = None
    unlock_at: Optional[str] = None
    lock_at: Optional[str] = None


def _submission_lines(submission: Submission, include_history: bool) -> List[str]:
    lines = [
        "Submission:",
        f"  Status: {submission.workflow_state or 'unknown'}",
        f"  Submitted: {format_timestamp(submission.submitted_at, 'Not submitted')}",
    ]
    if submission.score is not None:
        lines.append(f"  Score: {format_number(submission.score)}")

    teacher_comments = [
        c for c in submission.submission_comments if c.author and c.author.role == TEACHER_ROLE
    ]
    if teacher_comments:
        lines.append("  Teacher Comments:")
        for comment in teacher_comments:
            lines.append(f"    [{format_timestamp(comment.created_at)}] {comment.comment or ''}")
    else:
        lines.append("  Teacher Comments: None")

    if include_history and submission.versioned_submissions:
        lines.append("  Submission History:")
        history = sorted(submission.versioned_submissions, key=lambda v: v.submitted_at or "")
        for attempt, version in enumerate(history, start=1):
            lines.append(f"    Attempt {attempt} [{format_timestamp(version.submitted_at)}]:")
            if version.score is not None:
                lines.append(f"      Score: {format_number(version.score)}")
            if version.grade:
                lines.append(f"      Grade: {version.grade}")
            if version.submission_type:
                lines.append(f"      Type: {version.submission_type}")
    return lines


def _format_assignment(assignment: Assignment, include_history: bool) -> str:
    lines = [
        f"Assignment: {assignment.name}",
        f"ID: {assignment.id}",
        f"Due Date: {format_timestamp(assignment.due_at, 'No due date')}",
        f"Points Possible: {format_number(assignment.points_possible)}",
        f"Status: {'Published' if assignment.published else 'Unpublished'}",
    ]
    if assignment.submission:
        lines.extend(_submission_lines(assignment.submission, include_history))
    else:
        lines.append("Submission: No submission data available")
    return paragraph(lines)


@mcp.tool(description=LIST_ASSIGNMENTS_DESCRIPTION)
@tool_errors("fetch assignments")
async def list_assignments(
    course_id: str,
    student_id: Optional[str] = None,
    include_submission_history: bool = False,
    anonymous: bool = True,
) -> str:
    params: Dict[str, Any] = {"order_by": "position"}
    if student_id:
        params["include[]"] = ["submission", "submission_comments", "submission_history"]
        params["student_ids[]"] = [student_id]

    canvas = get_canvas()
    raw = await canvas.fetch_all(f"/api/v1/courses/{course_id}/assignments", params)
    if anonymous:
        raw = anonymizer.transform_assignments(raw)

    assignments = [Assignment.model_validate(a) for a in raw]
    return render_list(
        f"Assignments in course {course_id}:",
        [_format_assignment(a, include_submission_history) for a in assignments],
        "No assignments found in this course.",
    )


@mcp.tool(description=GET_ASSIGNMENT_DESCRIPTION)
@tool_errors("fetch assignment")
async def get_assignment(course_id: str, assignment_id: str) -> str:
    canvas = get_canvas()
    return to_json(await canvas.fetch(f"/api/v1/courses/{course_id}/assignments/{assignment_id}"))


@mcp.tool(description=CREATE_ASSIGNMENT_DESCRIPTION)
@tool_errors("create assignment")
async def create_assignment(
    course_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    due_at: Optional[str] = None,
    points_possible: Optional[float] = None,
    submission_types: Optional[List[str]] = None,
    published: Optional[bool] = None,
    grading_type: Optional[str] = None,
    assignment_group_id: Optional[int] = None,
) -> str:
    fields = without_none(
        name=name,
        description=description,
        due_at=due_at,
        points_possible=points_possible,
        submission_types=submission_types,
        published=published,
        grading_type=grading_type,
        assignment_group_id=assignment_group_id,
    )
    canvas = get_canvas()
    response = await canvas.create(f"/api/v1/courses/{course_id}/assignments", {"assignment": fields})
    return to_json(response)


@mcp.tool(description=UPDATE_ASSIGNMENT_DESCRIPTION)
@tool_errors("update assignment")
async def update_assignment(
    course_id: str,
    assignment_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    due_at: Optional[str] = None,
    points_possible: Optional[float] = None,
    submission_types: Optional[List[str]] = None,
    published: Optional[bool] = None,
    grading_type: Optional[str] = None,
    assignment_group_id: Optional[int] = None,
) -> str:
    fields = without_none(
        name=name,
        description=description,
        due_at=due_at,
        points_possible=points_possible,
        submission_types=submission_types,
        published=published,
        grading_type=grading_type,
        assignment_group_id=assignment_group_id,
    )
    canvas = get_canvas()
    response = await canvas.replace(
        f"/api/v1/courses/{course_id}/assignments/{assignment_id}",
        {"assignment": fields},
    )
    return to_json(response)


@mcp.tool(description=DELETE_ASSIGNMENT_DESCRIPTION)
@tool_errors("delete assignment")
async def delete_assignment(course_id: str, assignment_id: str) -> str:
    canvas = get_canvas()
    return to_json(await canvas.remove(f"/api/v1/courses/{course_id}/assignments/{assignment_id}"))


# ── Assignment groups ──────────────────────────────────────────────────


@mcp.tool(description=LIST_ASSIGNMENT_GROUPS_DESCRIPTION)
@tool_errors("fetch assignment groups")
async def list_assignment_groups(course_id: str) -> str:
    canvas = get_canvas()
    return to_json(await canvas.fetch_all(f"/api/v1/courses/{course_id}/assignment_groups"))


@mcp.tool(description=CREATE_ASSIGNMENT_GROUP_DESCRIPTION)
@tool_errors("create assignment group")
async def create_assignment_group(
    course_id: str,
    name: Optional[str] = None,
    position: Optional[int] = None,
    group_weight: Optional[float] = None,
    sis_source_id: Optional[str] = None,
    integration_data: Optional[Dict[str, Any]] = None,
    rules: Optional[Dict[str, Any]] = None,
) -> str:
    fields = without_none(
        name=name,
        position=position,
        group_weight=group_weight,
        sis_source_id=sis_source_id,
        integration_data=integration_data,
        rules=rules,
    )
    canvas = get_canvas()
    response = await canvas.create(f"/api/v1/courses/{course_id}/assignment_groups", fields)
    return to_json(response)


@mcp.tool(description=BULK_UPDATE_ASSIGNMENT_DATES_DESCRIPTION)
@tool_errors("bulk update assignment dates")
async def bulk_update_assignment_dates(
    course_id: str,
    assignment_dates: List[AssignmentDates],
) -> str:
    entries = []
    for entry in assignment_dates:
        if isinstance(entry, dict):
            entry = AssignmentDates.model_validate(entry)
        dates = entry.model_dump(exclude_none=True, exclude={"assignment_id"})
        entries.append({"id": entry.assignment_id, "all_dates": [{"base": True, **dates}]})

    canvas = get_canvas()
    # Canvas expects a bare JSON array for this endpoint
    response = await canvas.replace(
        f"/api/v1/courses/{course_id}/assignments/bulk_update",
        entries,
    )
    return to_json(response)
