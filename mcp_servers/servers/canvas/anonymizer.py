"""
Student data anonymizer.

Replaces learner names and emails with stable pseudonyms ("Student 1",
"Student 2", ...) before Canvas data is handed to the LLM. The same Canvas
user id always maps to the same pseudonym for the lifetime of the server
process, so the model can still follow one student across submissions,
comments and scores without ever seeing who they are.

Teacher and admin comment authors are left untouched.

One DataAnonymizer is created at startup (see app.py) and shared by every
tool. The mapping lives in memory only; nothing is written to disk.
"""

import threading
from typing import Any, Dict, Optional

LEARNER_ROLE = "student"
PSEUDONYM_PREFIX = "Student"

# Optional name fields Canvas includes on some user objects
_EXTRA_NAME_FIELDS = ("sortable_name", "short_name")

# Fields that can reveal how to reach or identify the student
_CONTACT_FIELDS = ("email", "login_id")


class DataAnonymizer:
    """Process-wide identity -> pseudonym mapping."""

    def __init__(self):
        self._lock = threading.Lock()
        self._names: Dict[str, str] = {}
        self._counter = 1

    def pseudonym_for(self, user_id: Any) -> str:
        """Return the pseudonym for a user id, assigning the next one if new."""
        key = str(user_id)
        # Lookup-or-assign must be atomic per identity; keep it free of awaits.
        with self._lock:
            name = self._names.get(key)
            if name is None:
                name = f"{PSEUDONYM_PREFIX} {self._counter}"
                self._names[key] = name
                self._counter += 1
            return name

    def reset(self):
        """Forget every assignment. Only for test isolation."""
        with self._lock:
            self._names.clear()
            self._counter = 1

    # ── Single records ─────────────────────────────────────────────────

    def transform_user(self, user: Any) -> Any:
        """
        Anonymize a user-shaped record.

        Records without an ``id`` are returned as an unchanged copy. The
        email is only replaced (never added) so the output shape matches
        the input.
        """
        if not isinstance(user, dict):
            return user
        user_id = user.get("id")
        if user_id is None or user_id == "":
            return dict(user)

        pseudonym = self.pseudonym_for(user_id)
        anonymized = dict(user)
        anonymized["name"] = pseudonym
        anonymized["display_name"] = pseudonym
        for field in _EXTRA_NAME_FIELDS:
            if field in user:
                anonymized[field] = pseudonym
        # login_id is often the school email or username
        for field in _CONTACT_FIELDS:
            if user.get(field):
                anonymized[field] = f"student{user_id}@example.com"
            elif field in user:
                anonymized[field] = None
        return anonymized

    def transform_submission(self, submission: Any) -> Any:
        """Anonymize the submitting user and any student comment authors."""
        if not isinstance(submission, dict):
            return submission

        anonymized = dict(submission)
        if submission.get("user"):
            anonymized["user"] = self.transform_user(submission["user"])

        comments = submission.get("submission_comments")
        if isinstance(comments, list):
            anonymized["submission_comments"] = [
                self._transform_comment(comment) for comment in comments
            ]
        return anonymized

    def transform_assignment(self, assignment: Any) -> Any:
        """Anonymize the submission embedded in an assignment, if any."""
        if not isinstance(assignment, dict):
            return assignment

        anonymized = dict(assignment)
        if assignment.get("submission"):
            anonymized["submission"] = self.transform_submission(assignment["submission"])
        return anonymized

    # ── Collections ────────────────────────────────────────────────────

    def transform_users(self, users: Any) -> Any:
        if not isinstance(users, list):
            return users
        return [self.transform_user(u) for u in users]

    def transform_submissions(self, submissions: Any) -> Any:
        if not isinstance(submissions, list):
            return submissions
        return [self.transform_submission(s) for s in submissions]

    def transform_assignments(self, assignments: Any) -> Any:
        if not isinstance(assignments, list):
            return assignments
        return [self.transform_assignment(a) for a in assignments]

    # ── Helpers ────────────────────────────────────────────────────────

    def _transform_comment(self, comment: Any) -> Any:
        if not isinstance(comment, dict):
            return comment
        copy = dict(comment)
        author: Optional[dict] = comment.get("author")
        if isinstance(author, dict) and author.get("role") == LEARNER_ROLE:
            copy["author"] = self.transform_user(author)
            if "author_name" in comment and author.get("id") not in (None, ""):
                copy["author_name"] = self.pseudonym_for(author["id"])
        return copy
