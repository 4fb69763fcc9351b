"""Rubrics, rubric assessments and rubric statistics."""

from typing import List

from mcp_servers.servers.canvas.app import anonymizer, get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import (
    ATTACH_RUBRIC_TO_ASSIGNMENT_DESCRIPTION,
    GET_RUBRIC_STATISTICS_DESCRIPTION,
    LIST_RUBRIC_ASSESSMENTS_DESCRIPTION,
    LIST_RUBRICS_DESCRIPTION,
)
from mcp_servers.servers.canvas.client import CanvasError
from mcp_servers.servers.canvas.formatting import (
    format_number,
    paragraph,
    render_list,
    to_json,
    tool_errors,
)
from mcp_servers.servers.canvas.models import Rubric
from mcp_servers.servers.canvas.rubric_stats import RubricStats, ScoreSummary, compute_rubric_stats


def _summary_lines(summary: ScoreSummary) -> List[str]:
    return [
        f"Average Score: {format_number(summary.average)}",
        f"Median Score: {format_number(summary.median)}",
        f"Min Score: {format_number(summary.minimum)}",
        f"Max Score: {format_number(summary.maximum)}",
    ]


def format_rubric_stats(stats: RubricStats, include_point_distribution: bool) -> str:
    lines = [
        "Overall Statistics:",
        f"Total Submissions: {stats.total_submissions}",
        f"Submissions with Assessment: {stats.overall.count}",
        *_summary_lines(stats.overall),
        "",
        "Criterion Statistics:",
    ]
    for criterion in stats.criteria:
        lines.extend(
            [
                "",
                f"Criterion: {criterion.description}",
                f"Points Possible: {format_number(criterion.points_possible)}",
                f"Total Assessments: {criterion.scores.count}",
                *_summary_lines(criterion.scores),
            ]
        )
        if include_point_distribution and criterion.distribution:
            lines.append("Point Distribution:")
            for score, count in sorted(criterion.distribution.items(), reverse=True):
                percentage = count / criterion.scores.count * 100
                lines.append(f"  {format_number(score)} points: {count} submissions ({percentage:.1f}%)")
    return "\n".join(lines)


@mcp.tool(description=LIST_RUBRICS_DESCRIPTION)
@tool_errors("fetch rubrics")
async def list_rubrics(course_id: str) -> str:
    raw = await get_canvas().fetch_all(f"/api/v1/courses/{course_id}/rubrics")
    rubrics = [Rubric.model_validate(r) for r in raw]
    return render_list(
        f"Rubrics in course {course_id}:",
        [
            paragraph(
                [
                    f"Rubric: {r.title}",
                    f"ID: {r.id}",
                    f"Description: {r.description or 'No description'}",
                ]
            )
            for r in rubrics
        ],
        "No rubrics found for this course.",
    )


@mcp.tool(description=GET_RUBRIC_STATISTICS_DESCRIPTION)
@tool_errors("fetch rubric statistics")
async def get_rubric_statistics(
    course_id: str,
    assignment_id: str,
    include_point_distribution: bool = True,
) -> str:
    canvas = get_canvas()
    assignment_path = f"/api/v1/courses/{course_id}/assignments/{assignment_id}"
    try:
        assignment = await canvas.fetch(assignment_path, {"include[]": ["rubric"]})
    except CanvasError as e:
        if e.status_code == 404:
            raise ValueError(f"Assignment {assignment_id} not found in course {course_id}") from e
        raise

    criteria = (assignment or {}).get("rubric")
    if not criteria:
        raise ValueError("No rubric found for this assignment")

    submissions = await canvas.fetch_all(
        f"{assignment_path}/submissions",
        {"include[]": ["rubric_assessment"]},
    )
    stats = compute_rubric_stats(criteria, submissions)
    return format_rubric_stats(stats, include_point_distribution)


@mcp.tool(description=LIST_RUBRIC_ASSESSMENTS_DESCRIPTION)
@tool_errors("fetch rubric assessments")
async def list_rubric_assessments(
    course_id: str,
    assignment_id: str,
    anonymous: bool = True,
) -> str:
    raw = await get_canvas().fetch_all(
        f"/api/v1/courses/{course_id}/assignments/{assignment_id}/submissions",
        {"include[]": ["rubric_assessment", "user"]},
    )
    if anonymous:
        raw = anonymizer.transform_submissions(raw)
    return to_json(raw)


@mcp.tool(description=ATTACH_RUBRIC_TO_ASSIGNMENT_DESCRIPTION)
@tool_errors("attach rubric")
async def attach_rubric_to_assignment(course_id: str, assignment_id: str, rubric_id: str) -> str:
    response = await get_canvas().create(
        f"/api/v1/courses/{course_id}/rubric_associations",
        {
            "rubric_association": {
                "rubric_id": rubric_id,
                "association_id": assignment_id,
                "association_type": "Assignment",
                "purpose": "grading",
                "use_for_grading": True,
            }
        },
    )
    return to_json(response)
