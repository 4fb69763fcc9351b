"""Canned prompts offered to the client alongside the tools."""

from datetime import date

from mcp_servers.servers.canvas.app import mcp
from mcp_servers.servers.canvas.canvas_descriptions import ANALYZE_RUBRIC_STATISTICS_PROMPT_DESCRIPTION


@mcp.prompt(description=ANALYZE_RUBRIC_STATISTICS_PROMPT_DESCRIPTION)
def analyze_rubric_statistics(course_name: str) -> str:
    today = date.today().isoformat()
    return f"""Please analyze the rubric statistics for the course "{course_name}". Follow these steps:

1. Use the list_courses tool to find the course ID for "{course_name}".

2. Use the list_assignments tool to get all assignments for this course.

3. For each formative assignment with a due date before {today}:
   - Use the get_rubric_statistics tool with include_point_distribution=true
   - Skip assignments due after {today}

4. Compare the assignments:
   - Score distributions per criterion and assignment
   - Progression or patterns between assignments
   - Criteria that are consistently strong or weak
   - Notable changes from one assignment to the next

5. Summarize the key insights, naming the analysis date ({today}).
"""
