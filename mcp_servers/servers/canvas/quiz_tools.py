"""Classic quizzes, quiz questions and question groups."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel

from mcp_servers.servers.canvas.app import get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import (
    CREATE_QUIZ_DESCRIPTION,
    CREATE_QUIZ_QUESTION_DESCRIPTION,
    CREATE_QUIZ_QUESTION_GROUP_DESCRIPTION,
    DELETE_QUIZ_DESCRIPTION,
    DELETE_QUIZ_QUESTION_DESCRIPTION,
    DELETE_QUIZ_QUESTION_GROUP_DESCRIPTION,
    GET_QUIZ_DESCRIPTION,
    GET_QUIZ_QUESTION_DESCRIPTION,
    GET_QUIZ_QUESTION_GROUP_DESCRIPTION,
    LIST_QUIZ_QUESTION_GROUPS_DESCRIPTION,
    LIST_QUIZ_QUESTIONS_DESCRIPTION,
    LIST_QUIZZES_DESCRIPTION,
    UPDATE_QUIZ_DESCRIPTION,
    UPDATE_QUIZ_QUESTION_DESCRIPTION,
    UPDATE_QUIZ_QUESTION_GROUP_DESCRIPTION,
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
from mcp_servers.servers.canvas.models import Quiz, QuizQuestion

QuizType = Literal["practice_quiz", "assignment", "graded_survey", "survey"]

# Question text is HTML and can be long; the list view only shows the start
QUESTION_PREVIEW_LENGTH = 100


class NewQuestion(BaseModel):
    question_name: Optional[str] = None
    question_text: str
    question_type: str
    points_possible: float
    answers: Optional[List[Dict[str, Any]]] = None


class QuestionChanges(BaseModel):
    question_name: Optional[str] = None
    question_text: Optional[str] = None
    question_type: Optional[str] = None
    points_possible: Optional[float] = None
    answers: Optional[List[Dict[str, Any]]] = None


class NewQuestionGroup(BaseModel):
    name: str
    pick_count: int
    question_points: float


class QuestionGroupChanges(BaseModel):
    name: Optional[str] = None
    pick_count: Optional[int] = None
    question_points: Optional[float] = None


def _quiz_path(course_id: str, quiz_id: Optional[str] = None) -> str:
    path = f"/api/v1/courses/{course_id}/quizzes"
    return f"{path}/{quiz_id}" if quiz_id else path


def _fields(model: Any) -> Dict[str, Any]:
    if isinstance(model, dict):
        return {k: v for k, v in model.items() if v is not None}
    return model.model_dump(exclude_none=True)


def _format_quiz(quiz: Quiz) -> str:
    return paragraph(
        [
            f"Quiz: {quiz.title}",
            f"ID: {quiz.id}",
            f"Due Date: {format_timestamp(quiz.due_at, 'No due date')}",
            f"Points Possible: {format_number(quiz.points_possible)}",
            f"Status: {'Published' if quiz.published else 'Unpublished'}",
        ]
    )


def _format_question(question: QuizQuestion) -> str:
    text = question.question_text or ""
    if len(text) > QUESTION_PREVIEW_LENGTH:
        text = text[:QUESTION_PREVIEW_LENGTH] + "..."
    return paragraph(
        [
            f"ID: {question.id}",
            f"Type: {question.question_type}",
            f"Text: {text}",
        ]
    )


# ── Quizzes ────────────────────────────────────────────────────────────


@mcp.tool(description=LIST_QUIZZES_DESCRIPTION)
@tool_errors("fetch quizzes")
async def list_quizzes(course_id: str) -> str:
    raw = await get_canvas().fetch_all(_quiz_path(course_id))
    quizzes = [Quiz.model_validate(q) for q in raw]
    return render_list(
        f"Quizzes in course {course_id}:",
        [_format_quiz(q) for q in quizzes],
        "No quizzes found in this course.",
    )


@mcp.tool(description=GET_QUIZ_DESCRIPTION)
@tool_errors("fetch quiz")
async def get_quiz(course_id: str, quiz_id: str) -> str:
    return to_json(await get_canvas().fetch(_quiz_path(course_id, quiz_id)))


@mcp.tool(description=CREATE_QUIZ_DESCRIPTION)
@tool_errors("create quiz")
async def create_quiz(
    course_id: str,
    title: str,
    description: Optional[str] = None,
    quiz_type: Optional[QuizType] = None,
    due_at: Optional[str] = None,
    points_possible: Optional[float] = None,
    published: Optional[bool] = None,
) -> str:
    fields = without_none(
        title=title,
        description=description,
        quiz_type=quiz_type,
        due_at=due_at,
        points_possible=points_possible,
        published=published,
    )
    return to_json(await get_canvas().create(_quiz_path(course_id), {"quiz": fields}))


@mcp.tool(description=UPDATE_QUIZ_DESCRIPTION)
@tool_errors("update quiz")
async def update_quiz(
    course_id: str,
    quiz_id: str,
    title: Optional[str] = None,
    description: Optional[str] = None,
    quiz_type: Optional[QuizType] = None,
    due_at: Optional[str] = None,
    points_possible: Optional[float] = None,
    published: Optional[bool] = None,
) -> str:
    fields = without_none(
        title=title,
        description=description,
        quiz_type=quiz_type,
        due_at=due_at,
        points_possible=points_possible,
        published=published,
    )
    return to_json(await get_canvas().replace(_quiz_path(course_id, quiz_id), {"quiz": fields}))


@mcp.tool(description=DELETE_QUIZ_DESCRIPTION)
@tool_errors("delete quiz")
async def delete_quiz(course_id: str, quiz_id: str) -> str:
    return to_json(await get_canvas().remove(_quiz_path(course_id, quiz_id)))


# ── Questions ──────────────────────────────────────────────────────────


@mcp.tool(description=LIST_QUIZ_QUESTIONS_DESCRIPTION)
@tool_errors("fetch quiz questions")
async def list_quiz_questions(course_id: str, quiz_id: str) -> str:
    raw = await get_canvas().fetch_all(f"{_quiz_path(course_id, quiz_id)}/questions")
    questions = [QuizQuestion.model_validate(q) for q in raw]
    return render_list(
        f"Questions for quiz {quiz_id}:",
        [_format_question(q) for q in questions],
        "No questions found for this quiz.",
    )


@mcp.tool(description=GET_QUIZ_QUESTION_DESCRIPTION)
@tool_errors("fetch quiz question")
async def get_quiz_question(course_id: str, quiz_id: str, question_id: str) -> str:
    return to_json(
        await get_canvas().fetch(f"{_quiz_path(course_id, quiz_id)}/questions/{question_id}")
    )


@mcp.tool(description=CREATE_QUIZ_QUESTION_DESCRIPTION)
@tool_errors("create quiz question")
async def create_quiz_question(course_id: str, quiz_id: str, question: NewQuestion) -> str:
    response = await get_canvas().create(
        f"{_quiz_path(course_id, quiz_id)}/questions",
        {"question": _fields(question)},
    )
    return to_json(response)


@mcp.tool(description=UPDATE_QUIZ_QUESTION_DESCRIPTION)
@tool_errors("update quiz question")
async def update_quiz_question(
    course_id: str,
    quiz_id: str,
    question_id: str,
    question: QuestionChanges,
) -> str:
    response = await get_canvas().replace(
        f"{_quiz_path(course_id, quiz_id)}/questions/{question_id}",
        {"question": _fields(question)},
    )
    return to_json(response)


@mcp.tool(description=DELETE_QUIZ_QUESTION_DESCRIPTION)
@tool_errors("delete quiz question")
async def delete_quiz_question(course_id: str, quiz_id: str, question_id: str) -> str:
    await get_canvas().remove(f"{_quiz_path(course_id, quiz_id)}/questions/{question_id}")
    return f"Successfully deleted question {question_id} from quiz {quiz_id}."


# ── Question groups ────────────────────────────────────────────────────


@mcp.tool(description=LIST_QUIZ_QUESTION_GROUPS_DESCRIPTION)
@tool_errors("fetch quiz question groups")
async def list_quiz_question_groups(course_id: str, quiz_id: str) -> str:
    return to_json(await get_canvas().fetch_all(f"{_quiz_path(course_id, quiz_id)}/groups"))


@mcp.tool(description=GET_QUIZ_QUESTION_GROUP_DESCRIPTION)
@tool_errors("fetch quiz question group")
async def get_quiz_question_group(course_id: str, quiz_id: str, group_id: str) -> str:
    return to_json(await get_canvas().fetch(f"{_quiz_path(course_id, quiz_id)}/groups/{group_id}"))


@mcp.tool(description=CREATE_QUIZ_QUESTION_GROUP_DESCRIPTION)
@tool_errors("create quiz question group")
async def create_quiz_question_group(
    course_id: str,
    quiz_id: str,
    quiz_group: NewQuestionGroup,
) -> str:
    # Canvas wraps group attributes in a one-element list
    response = await get_canvas().create(
        f"{_quiz_path(course_id, quiz_id)}/groups",
        {"quiz_groups": [_fields(quiz_group)]},
    )
    return to_json(response)


@mcp.tool(description=UPDATE_QUIZ_QUESTION_GROUP_DESCRIPTION)
@tool_errors("update quiz question group")
async def update_quiz_question_group(
    course_id: str,
    quiz_id: str,
    group_id: str,
    quiz_group: QuestionGroupChanges,
) -> str:
    response = await get_canvas().replace(
        f"{_quiz_path(course_id, quiz_id)}/groups/{group_id}",
        {"quiz_groups": [_fields(quiz_group)]},
    )
    return to_json(response)


@mcp.tool(description=DELETE_QUIZ_QUESTION_GROUP_DESCRIPTION)
@tool_errors("delete quiz question group")
async def delete_quiz_question_group(course_id: str, quiz_id: str, group_id: str) -> str:
    await get_canvas().remove(f"{_quiz_path(course_id, quiz_id)}/groups/{group_id}")
    return f"Successfully deleted group {group_id} from quiz {quiz_id}."
