"""
Canvas record shapes.

Only the fields the tools actually read are declared, all optional. Anything
else Canvas sends is kept in the model's extra bag (``extra="allow"``) and
ignored by the formatters.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

CanvasId = Union[int, str]


class CanvasRecord(BaseModel):
    model_config = ConfigDict(extra="allow")


class Term(CanvasRecord):
    id: Optional[CanvasId] = None
    name: Optional[str] = None
    start_at: Optional[str] = None
    end_at: Optional[str] = None


class Course(CanvasRecord):
    id: CanvasId
    name: Optional[str] = None
    course_code: Optional[str] = None
    workflow_state: Optional[str] = None
    term: Optional[Term] = None


class User(CanvasRecord):
    id: Optional[CanvasId] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    sis_user_id: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = None


class Section(CanvasRecord):
    id: CanvasId
    name: Optional[str] = None
    sis_section_id: Optional[str] = None
    start_at: Optional[str] = None
    end_at: Optional[str] = None
    total_students: Optional[int] = None
    restrict_enrollments_to_section_dates: Optional[bool] = None


class SubmissionComment(CanvasRecord):
    id: Optional[CanvasId] = None
    comment: Optional[str] = None
    created_at: Optional[str] = None
    author_name: Optional[str] = None
    author: Optional[User] = None


class SubmissionVersion(CanvasRecord):
    submitted_at: Optional[str] = None
    score: Optional[float] = None
    grade: Optional[str] = None
    submission_type: Optional[str] = None


class Submission(CanvasRecord):
    id: Optional[CanvasId] = None
    user_id: Optional[CanvasId] = None
    user: Optional[User] = None
    workflow_state: Optional[str] = None
    submitted_at: Optional[str] = None
    grade: Optional[str] = None
    score: Optional[float] = None
    late: Optional[bool] = None
    missing: Optional[bool] = None
    submission_type: Optional[str] = None
    submission_comments: List[SubmissionComment] = []
    versioned_submissions: List[SubmissionVersion] = []
    rubric_assessment: Optional[Dict[str, Any]] = None


class Assignment(CanvasRecord):
    id: CanvasId
    name: Optional[str] = None
    due_at: Optional[str] = None
    points_possible: Optional[float] = None
    published: Optional[bool] = None
    submission: Optional[Submission] = None
    rubric: Optional[List["RubricCriterion"]] = None


class ModuleItem(CanvasRecord):
    id: CanvasId
    type: Optional[str] = None
    title: Optional[str] = None
    page_url: Optional[str] = None
    url: Optional[str] = None
    position: Optional[int] = None
    published: Optional[bool] = None

    @property
    def label(self) -> str:
        return self.title or self.page_url or self.url or "Untitled"


class Module(CanvasRecord):
    id: CanvasId
    name: Optional[str] = None
    position: Optional[int] = None
    published: Optional[bool] = None
    items: Optional[List[ModuleItem]] = None


class Page(CanvasRecord):
    url: Optional[str] = None
    title: Optional[str] = None
    page_id: Optional[CanvasId] = None
    published: Optional[bool] = None
    updated_at: Optional[str] = None
    body: Optional[str] = None


class PageRevision(CanvasRecord):
    revision_id: Optional[CanvasId] = None
    id: Optional[CanvasId] = None
    updated_at: Optional[str] = None
    edited_by: Optional[User] = None
    edited_by_id: Optional[CanvasId] = None

    @property
    def editor(self) -> str:
        if self.edited_by and self.edited_by.display_name:
            return self.edited_by.display_name
        if self.edited_by_id is not None:
            return str(self.edited_by_id)
        return "Unknown"


class Quiz(CanvasRecord):
    id: CanvasId
    title: Optional[str] = None
    due_at: Optional[str] = None
    points_possible: Optional[float] = None
    published: Optional[bool] = None


class QuizQuestion(CanvasRecord):
    id: CanvasId
    question_type: Optional[str] = None
    question_text: Optional[str] = None


class RubricCriterion(CanvasRecord):
    id: CanvasId
    description: Optional[str] = None
    points: Optional[float] = None


class Rubric(CanvasRecord):
    id: CanvasId
    title: Optional[str] = None
    description: Optional[str] = None


Assignment.model_rebuild()
