"""
Submission listing and grading.

Submissions are anonymized (when requested) while they are still raw
dicts, right after pagination and before any formatting, so no real
student name reaches the report.
"""

from typing import Any, Dict, Optional

from mcp_servers.servers.canvas.app import anonymizer, get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import (
    GRADE_SUBMISSION_DESCRIPTION,
    LIST_ASSIGNMENT_SUBMISSIONS_DESCRIPTION,
    POST_SUBMISSION_COMMENT_DESCRIPTION,
)
from mcp_servers.servers.canvas.formatting import (
    format_number,
    format_timestamp,
    lines_for_comments,
    paragraph,
    render_list,
    to_json,
    tool_errors,
)
from mcp_servers.servers.canvas.models import Submission


def format_submission(submission: Submission, include_comments: bool) -> str:
    """One paragraph per submission; shared with the section tools."""
    student = submission.user.name if submission.user and submission.user.name else "Unknown"
    lines = [
        f"Student: {student}",
        f"Status: {submission.workflow_state or 'unknown'}",
        f"Submitted: {format_timestamp(submission.submitted_at, 'Not submitted')}",
        f"Grade: {submission.grade or 'No grade'}",
        f"Score: {format_number(submission.score, 'No score')}",
    ]
    if submission.late:
        lines.append("Late: Yes")
    if submission.missing:
        lines.append("Missing: Yes")
    if submission.submission_type:
        lines.append(f"Submission Type: {submission.submission_type}")
    if include_comments and submission.submission_comments:
        lines.append("Comments:")
        lines.extend(lines_for_comments(submission.submission_comments))
    return paragraph(lines)


@mcp.tool(description=LIST_ASSIGNMENT_SUBMISSIONS_DESCRIPTION)
@tool_errors("fetch assignment submissions")
async def list_assignment_submissions(
    course_id: str,
    assignment_id: str,
    include_comments: bool = True,
    anonymous: bool = True,
) -> str:
    canvas = get_canvas()
    raw = await canvas.fetch_all(
        f"/api/v1/courses/{course_id}/assignments/{assignment_id}/submissions",
        {"include[]": ["user", "submission_comments"]},
    )
    if anonymous:
        raw = anonymizer.transform_submissions(raw)

    submissions = [Submission.model_validate(s) for s in raw]
    return render_list(
        f"Submissions for assignment {assignment_id} in course {course_id}:",
        [format_submission(s, include_comments) for s in submissions],
        "No submissions found for this assignment.",
    )


@mcp.tool(description=GRADE_SUBMISSION_DESCRIPTION)
@tool_errors("grade submission")
async def grade_submission(
    course_id: str,
    assignment_id: str,
    user_id: str,
    posted_grade: Optional[str] = None,
    score: Optional[float] = None,
    rubric_assessment: Optional[Dict[str, Any]] = None,
    comment: Optional[str] = None,
) -> str:
    payload: Dict[str, Any] = {}
    if posted_grade is not None:
        payload["submission"] = {"posted_grade": posted_grade}
    elif score is not None:
        # Canvas only accepts scores through posted_grade
        payload["submission"] = {"posted_grade": format_number(score)}
    if rubric_assessment is not None:
        payload["rubric_assessment"] = rubric_assessment
    if comment is not None:
        payload["comment"] = {"text_comment": comment}
    if not payload:
        raise ValueError("Nothing to write: pass posted_grade, score, rubric_assessment or comment")

    canvas = get_canvas()
    response = await canvas.replace(
        f"/api/v1/courses/{course_id}/assignments/{assignment_id}/submissions/{user_id}",
        payload,
    )
    return to_json(response)


@mcp.tool(description=POST_SUBMISSION_COMMENT_DESCRIPTION)
@tool_errors("post submission comment")
async def post_submission_comment(
    course_id: str,
    assignment_id: str,
    user_id: str,
    comment: str,
) -> str:
    canvas = get_canvas()
    response = await canvas.replace(
        f"/api/v1/courses/{course_id}/assignments/{assignment_id}/submissions/{user_id}",
        {"comment": {"text_comment": comment}},
    )
    return to_json(response)
