SERVER_INSTRUCTIONS = """
Tools for a teacher's Canvas LMS account: courses, students, sections,
assignments, submissions, modules, pages, quizzes and rubrics.
Student names and emails are replaced with stable pseudonyms ("Student 1",
"Student 2", ...) unless a tool is called with anonymous=false.
"""

# ── Courses ────────────────────────────────────────────────────────────

LIST_COURSES_DESCRIPTION = """
**COURSE LIST — Find the teacher's active Canvas courses**
Lists every available course the authenticated user is enrolled in, with its term.

Use this tool to:
1. Look up the course ID needed by every other Canvas tool.
2. Match a course name the user mentions ("my biology class") to its ID.

WORKFLOW: Almost every Canvas task starts here. Call this first when you do not yet know the course ID.

Returns: Course name, term, ID and course code for each active course.
"""

POST_ANNOUNCEMENT_DESCRIPTION = """
**ANNOUNCEMENT — Post an announcement to a course**
Publishes a new announcement visible to everyone in the course.

IMPORTANT:
- Always confirm the title and message with the user before posting.
- Students are notified immediately; posting cannot be undone from here.

Parameters: course_id, title, message (HTML allowed).
Returns: Confirmation with the announcement title.
"""

# ── Students & sections ───────────────────────────────────────────────

LIST_STUDENTS_DESCRIPTION = """
**STUDENT ROSTER — List every student enrolled in a course**
Fetches the complete roster (active and invited students), across all pages.

Use this tool to:
1. Count students or check who is enrolled.
2. Get student IDs for grading or submission lookups.

PRIVACY: Names and emails are anonymized by default ("Student 1", ...). The same student keeps the same label for the whole session.
Only pass anonymous=false if the user explicitly needs real names.

Returns: Name, ID, SIS ID, avatar URL (and email if include_email=true), plus a total.
"""

LIST_SECTIONS_DESCRIPTION = """
**SECTIONS — List the sections of a course**
Returns every section with its dates and optionally the number of students in each.

Returns: Name, ID, SIS ID, start/end dates and student counts, plus a total.
"""

LIST_SECTION_SUBMISSIONS_DESCRIPTION = """
**SECTION SUBMISSIONS — Submissions for one assignment, filtered to a section**
Fetches every submission for the assignment from students in the given section, including comments.

PRIVACY: Student names are anonymized by default. Teacher comments are shown as written.

Returns: Student, status, submission time, grade, score, late/missing flags and comments for each submission.
"""

# ── Assignments ────────────────────────────────────────────────────────

LIST_ASSIGNMENTS_DESCRIPTION = """
**ASSIGNMENT LIST — All assignments in a course**
Lists every assignment in course order with due date, points and publish state.

Use this tool to:
1. Find an assignment ID by name.
2. See what is due and when.
3. With student_id: check one student's submission status, score, teacher comments and (optionally) attempt history.

Returns: Assignment name, ID, due date, points, status and submission details, plus a total.
"""

GET_ASSIGNMENT_DESCRIPTION = """
Fetch metadata for a single assignment (due date, points, rubric, submission types, etc).
Returns the raw Canvas assignment as JSON.
"""

CREATE_ASSIGNMENT_DESCRIPTION = """
Create a new assignment in a course. All fields are optional except course_id.
Dates use ISO 8601 (e.g. 2025-03-01T23:59:00Z). Returns the created assignment as JSON.
"""

UPDATE_ASSIGNMENT_DESCRIPTION = """
Update an assignment. All fields are optional except course_id and assignment_id; only the fields you pass are changed.
Returns the updated assignment as JSON.
"""

DELETE_ASSIGNMENT_DESCRIPTION = """
Delete (archive) an assignment from a course.
IMPORTANT: Confirm with the user first. Returns the deleted assignment as JSON.
"""

LIST_ASSIGNMENT_GROUPS_DESCRIPTION = """
List all assignment groups (grade buckets such as "Homework" or "Exams") in a course, as JSON.
"""

CREATE_ASSIGNMENT_GROUP_DESCRIPTION = """
Create a new assignment group (bucket) in a course. All fields are optional except course_id.
Returns the created group as JSON.
"""

BULK_UPDATE_ASSIGNMENT_DATES_DESCRIPTION = """
**BULK DATE UPDATE — Shift due/unlock/lock dates for many assignments at once**
Each entry needs an assignment_id and any of due_at, unlock_at, lock_at (ISO 8601).

IMPORTANT: Confirm the new dates with the user before calling.
Returns: The Canvas progress object as JSON.
"""

# ── Submissions ────────────────────────────────────────────────────────

LIST_ASSIGNMENT_SUBMISSIONS_DESCRIPTION = """
**SUBMISSIONS — Every student's submission status and comments for an assignment**
Fetches all submissions (all pages) with the submitting user and comment thread.

PRIVACY: Student names are anonymized by default and stay consistent with other tools in this session.
Teacher comments are shown with the teacher's real name.

Returns: Student, status, submission time, grade, score, late/missing flags and comments, plus a total.
"""

GRADE_SUBMISSION_DESCRIPTION = """
**GRADE — Write back a grade, score, rubric points or comment for one student's submission**

IMPORTANT:
- Confirm the grade with the user before writing it.
- user_id is the Canvas user ID (from list_students or list_assignment_submissions).
- rubric_assessment maps criterion IDs to {"points": n, "comments": "..."}.

Returns: The updated submission as JSON.
"""

POST_SUBMISSION_COMMENT_DESCRIPTION = """
Attach targeted feedback as a comment on a student's submission.
Returns the updated submission as JSON.
"""

# ── Modules ────────────────────────────────────────────────────────────

LIST_MODULES_DESCRIPTION = """
Return all modules in a course, optionally with their items inline.
Returns: Name, ID, position, published state (and items) for each module.
"""

LIST_MODULE_ITEMS_DESCRIPTION = """
Given a module ID, list its items (pages, quizzes, files, etc).
Returns: Type, title, ID, position and published state for each item.
"""

TOGGLE_MODULE_PUBLISH_DESCRIPTION = """
Publish or unpublish a module by flipping its current published state.
IMPORTANT: Publishing makes the module visible to students immediately.
"""

# ── Pages ──────────────────────────────────────────────────────────────

LIST_PAGES_DESCRIPTION = """
List all wiki pages in a course. Pages are addressed by their URL slug (e.g. "syllabus") in the other page tools.
"""

GET_PAGE_CONTENT_DESCRIPTION = """
Get the full HTML body and metadata of a page by its URL slug.
"""

UPDATE_PAGE_CONTENT_DESCRIPTION = """
**FULL REPLACEMENT — Update or create a page with completely new content**
Use this when you have the entire new HTML body ready, or when creating a page from scratch.
For small edits to existing content, use patch_page_content instead.

If no body is given (and the styleguide preview is on), the course styleguide is returned so you can write the page to match it, then call this tool again with the body.

Returns: The saved page's slug, title, ID, published state and update time.
"""

LIST_PAGE_REVISIONS_DESCRIPTION = """
List the revision history of a page (revision ID, time, editor).
"""

REVERT_PAGE_REVISION_DESCRIPTION = """
Revert a page to a previous revision. Get revision IDs from list_page_revisions.
IMPORTANT: Confirm with the user first; the current content is replaced.
"""

PATCH_PAGE_CONTENT_DESCRIPTION = """
**SMART EDITING, STEP 1 — Fetch a page so YOU can make targeted edits**
Give natural language instructions (e.g. "fix typos", "update office hours to 2-4pm MWF", "add an exam warning").
This tool does NOT change anything. It returns the current HTML, your instructions and the course styleguide.

WORKFLOW:
1. Call patch_page_content with the instructions.
2. Rewrite the returned HTML yourself according to the instructions.
3. Call apply_page_changes with the full modified HTML to save it.

For complete replacement of a page, use update_page_content instead.
"""

APPLY_PAGE_CHANGES_DESCRIPTION = """
**SMART EDITING, STEP 2 — Save the page content you produced after patch_page_content**
Writes new_content as the page body (and optionally a new title / editing roles) in one update.

IMPORTANT: Pass the COMPLETE modified HTML body, not a diff.
"""

GENERATE_STYLEGUIDE_DESCRIPTION = """
**STYLEGUIDE — Create the course's page styleguide**
Generates and saves a Canvas styleguide page (headings, alerts, tables, accessibility and link standards).
Page creation and editing tools reference it automatically to keep formatting consistent.
"""

GET_STYLEGUIDE_DESCRIPTION = """
Fetch the course styleguide to reference while writing or editing page content.
If none exists, create one with generate_styleguide.
"""

# ── Quizzes ────────────────────────────────────────────────────────────

LIST_QUIZZES_DESCRIPTION = """
Get a list of all (classic) quizzes in a course with due date, points and published state.
"""

GET_QUIZ_DESCRIPTION = """
Fetch metadata for a single quiz as JSON.
"""

CREATE_QUIZ_DESCRIPTION = """
Create a new quiz in a course. quiz_type is one of practice_quiz, assignment, graded_survey, survey.
Returns the created quiz as JSON.
"""

UPDATE_QUIZ_DESCRIPTION = """
Update an existing quiz. Only the fields you pass are changed. Returns the quiz as JSON.
"""

DELETE_QUIZ_DESCRIPTION = """
Delete a quiz from a course. IMPORTANT: Confirm with the user first.
"""

LIST_QUIZ_QUESTIONS_DESCRIPTION = """
List all questions in a quiz (ID, type and the start of the question text).
"""

GET_QUIZ_QUESTION_DESCRIPTION = """
Fetch a single quiz question, including answers, as JSON.
"""

CREATE_QUIZ_QUESTION_DESCRIPTION = """
Create a new question in a quiz. question needs question_text, question_type and points_possible;
answers is a list of Canvas answer objects. Returns the created question as JSON.
"""

UPDATE_QUIZ_QUESTION_DESCRIPTION = """
Update an existing quiz question. Only the fields you pass are changed. Returns the question as JSON.
"""

DELETE_QUIZ_QUESTION_DESCRIPTION = """
Delete a question from a quiz.
"""

LIST_QUIZ_QUESTION_GROUPS_DESCRIPTION = """
List the question groups (random question banks) of a quiz as JSON.
"""

GET_QUIZ_QUESTION_GROUP_DESCRIPTION = """
Fetch a single quiz question group as JSON.
"""

CREATE_QUIZ_QUESTION_GROUP_DESCRIPTION = """
Create a question group in a quiz (name, pick_count, question_points). Returns the group as JSON.
"""

UPDATE_QUIZ_QUESTION_GROUP_DESCRIPTION = """
Update a quiz question group. Only the fields you pass are changed. Returns the group as JSON.
"""

DELETE_QUIZ_QUESTION_GROUP_DESCRIPTION = """
Delete a question group from a quiz.
"""

# ── Rubrics ────────────────────────────────────────────────────────────

LIST_RUBRICS_DESCRIPTION = """
List all rubrics defined in a course (title, ID, description).
"""

GET_RUBRIC_STATISTICS_DESCRIPTION = """
**RUBRIC STATISTICS — How students scored on each rubric criterion of an assignment**
Aggregates every rubric assessment for the assignment.

Use this tool to:
1. Find criteria students struggle with (low average / median).
2. Compare score spreads between criteria.
3. Build charts from the point distribution (how many students got each score).

Returns: Overall statistics (submissions, average, median, min, max) and the same per criterion,
with an optional point distribution. No student names are included.
"""

LIST_RUBRIC_ASSESSMENTS_DESCRIPTION = """
List all submissions of an assignment with their rubric assessments, as JSON.
Student names are anonymized by default.
"""

ATTACH_RUBRIC_TO_ASSIGNMENT_DESCRIPTION = """
Attach an existing course rubric to an assignment. Returns the updated assignment as JSON.
"""

# ── Prompts ────────────────────────────────────────────────────────────

ANALYZE_RUBRIC_STATISTICS_PROMPT_DESCRIPTION = """
Analyze rubric statistics for the formative assignments in a course.
"""
