"""
Wiki page tools, including the two-step "smart editing" flow.

patch_page_content (step 1) only reads: it packages the current HTML, the
caller's instructions and the course styleguide for the LLM to rewrite.
apply_page_changes (step 2) performs the single write with whatever
content the LLM produced. The edit itself never happens in this server.
"""

from typing import List, Literal, Optional

from mcp_servers.servers.canvas import config
from mcp_servers.servers.canvas.app import get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import (
    APPLY_PAGE_CHANGES_DESCRIPTION,
    GENERATE_STYLEGUIDE_DESCRIPTION,
    GET_PAGE_CONTENT_DESCRIPTION,
    GET_STYLEGUIDE_DESCRIPTION,
    LIST_PAGE_REVISIONS_DESCRIPTION,
    LIST_PAGES_DESCRIPTION,
    PATCH_PAGE_CONTENT_DESCRIPTION,
    REVERT_PAGE_REVISION_DESCRIPTION,
    UPDATE_PAGE_CONTENT_DESCRIPTION,
)
from mcp_servers.servers.canvas.client import CanvasError
from mcp_servers.servers.canvas.formatting import (
    format_timestamp,
    paragraph,
    render_list,
    tool_errors,
    yes_no,
)
from mcp_servers.servers.canvas.models import Page, PageRevision
from mcp_servers.servers.canvas.styleguide import generate_styleguide as build_styleguide

EditingRole = Literal["teachers", "students", "members", "public"]


def _page_path(course_id: str, page_url: str) -> str:
    return f"/api/v1/courses/{course_id}/pages/{page_url}"


def _page_summary(page: Page) -> List[str]:
    return [
        f"Title: {page.title}",
        f"URL Slug: {page.url}",
        f"ID: {page.page_id}",
        f"Published: {yes_no(page.published)}",
        f"Updated At: {format_timestamp(page.updated_at)}",
    ]


async def _fetch_page(course_id: str, page_url: str) -> Page:
    return Page.model_validate(await get_canvas().fetch(_page_path(course_id, page_url)))


async def _fetch_styleguide(course_id: str) -> Optional[Page]:
    """The course styleguide, or None if the course has none."""
    try:
        return await _fetch_page(course_id, config.STYLEGUIDE_PAGE_URL)
    except CanvasError as e:
        if e.status_code == 404:
            return None
        raise


async def _save_page(
    course_id: str,
    page_url: str,
    title: Optional[str] = None,
    body: Optional[str] = None,
    editing_roles: Optional[List[str]] = None,
) -> Page:
    wiki_page = {}
    if title is not None:
        wiki_page["title"] = title
    if body is not None:
        wiki_page["body"] = body
    if editing_roles:
        wiki_page["editing_roles"] = ",".join(editing_roles)

    # PUT creates the page if the slug does not exist yet
    response = await get_canvas().replace(_page_path(course_id, page_url), {"wiki_page": wiki_page})
    return Page.model_validate(response)


# ── Reading ────────────────────────────────────────────────────────────


@mcp.tool(description=LIST_PAGES_DESCRIPTION)
@tool_errors("fetch pages")
async def list_pages(course_id: str) -> str:
    raw = await get_canvas().fetch_all(f"/api/v1/courses/{course_id}/pages")
    pages = [Page.model_validate(p) for p in raw]
    return render_list(
        f"Pages in course {course_id}:",
        [
            paragraph(
                [
                    f"Title: {p.title}",
                    f"URL Slug: {p.url}",
                    f"ID: {p.page_id}",
                    f"Published: {yes_no(p.published)}",
                ]
            )
            for p in pages
        ],
        "No pages found in this course.",
    )


@mcp.tool(description=GET_PAGE_CONTENT_DESCRIPTION)
@tool_errors("fetch page content")
async def get_page_content(course_id: str, page_url: str) -> str:
    page = await _fetch_page(course_id, page_url)
    return "\n".join(_page_summary(page) + ["", "Body (HTML):", page.body or "[No content]"])


@mcp.tool(description=LIST_PAGE_REVISIONS_DESCRIPTION)
@tool_errors("fetch page revisions")
async def list_page_revisions(course_id: str, page_url: str) -> str:
    raw = await get_canvas().fetch_all(f"{_page_path(course_id, page_url)}/revisions")
    revisions = [PageRevision.model_validate(r) for r in raw]
    return render_list(
        f"Revisions for page '{page_url}' in course {course_id}:",
        [
            paragraph(
                [
                    f"Revision ID: {r.revision_id if r.revision_id is not None else r.id}",
                    f"Updated At: {format_timestamp(r.updated_at)}",
                    f"Edited By: {r.editor}",
                ]
            )
            for r in revisions
        ],
        "No revisions found for this page.",
    )


# ── Writing ────────────────────────────────────────────────────────────


@mcp.tool(description=UPDATE_PAGE_CONTENT_DESCRIPTION)
@tool_errors("update page")
async def update_page_content(
    course_id: str,
    page_url: str,
    title: Optional[str] = None,
    body: Optional[str] = None,
    editing_roles: Optional[List[EditingRole]] = None,
    ignore_styleguide: bool = False,
    show_styleguide_preview: bool = True,
) -> str:
    if body is None and show_styleguide_preview and not ignore_styleguide:
        styleguide = await _fetch_styleguide(course_id)
        if styleguide is not None:
            return "\n".join(
                [
                    f"Creating new page '{page_url}' in course {course_id}",
                    f"Title: {title or 'Not specified'}",
                    "",
                    "--- COURSE STYLEGUIDE FOR REFERENCE ---",
                    styleguide.body or "No styleguide content found",
                    "--- END STYLEGUIDE ---",
                    "",
                    "Write the page content following the styleguide above, then call "
                    "update_page_content again with the body parameter set to the HTML.",
                ]
            )

    page = await _save_page(course_id, page_url, title, body, editing_roles)
    return "\n".join([f"Page '{page.url}' updated in course {course_id}."] + _page_summary(page))


@mcp.tool(description=REVERT_PAGE_REVISION_DESCRIPTION)
@tool_errors("revert page revision")
async def revert_page_revision(course_id: str, page_url: str, revision_id: str) -> str:
    response = await get_canvas().create(f"{_page_path(course_id, page_url)}/revisions/{revision_id}")
    page = Page.model_validate(response)
    return "\n".join(
        [f"Page '{page_url}' in course {course_id} reverted to revision {revision_id}."]
        + _page_summary(page)
    )


# ── Two-step editing ───────────────────────────────────────────────────


@mcp.tool(description=PATCH_PAGE_CONTENT_DESCRIPTION)
@tool_errors("fetch page for patching")
async def patch_page_content(
    course_id: str,
    page_url: str,
    instructions: str,
    ignore_styleguide: bool = False,
) -> str:
    page = await _fetch_page(course_id, page_url)

    styleguide_lines: List[str] = []
    if not ignore_styleguide:
        styleguide = await _fetch_styleguide(course_id)
        if styleguide is not None:
            styleguide_lines = [
                "",
                "--- COURSE STYLEGUIDE STANDARDS ---",
                styleguide.body or "",
                "--- END STYLEGUIDE ---",
                "",
                "IMPORTANT: Keep all formatting consistent with the styleguide above.",
            ]
        else:
            styleguide_lines = [
                "",
                "No course styleguide found. Consider creating one with generate_styleguide.",
            ]

    return "\n".join(
        [
            f"Current page content for '{page_url}' in course {course_id}:",
            f"Title: {page.title}",
            f"Published: {yes_no(page.published)}",
            "",
            "--- CURRENT CONTENT ---",
            page.body or "",
            "--- END CURRENT CONTENT ---",
        ]
        + styleguide_lines
        + [
            "",
            f"Instructions: {instructions}",
            "",
            "Modify the HTML above according to the instructions. Preserve the existing "
            "structure and formatting unless the instructions say otherwise.",
            f"Then call apply_page_changes with course_id={course_id}, page_url={page_url} "
            "and the COMPLETE modified HTML as new_content. Nothing has been changed yet.",
        ]
    )


@mcp.tool(description=APPLY_PAGE_CHANGES_DESCRIPTION)
@tool_errors("apply page changes")
async def apply_page_changes(
    course_id: str,
    page_url: str,
    new_content: str,
    title: Optional[str] = None,
    editing_roles: Optional[List[EditingRole]] = None,
) -> str:
    page = await _save_page(course_id, page_url, title, new_content, editing_roles)
    return "\n".join(
        [f"Page '{page.url}' successfully updated in course {course_id}."]
        + _page_summary(page)
    )


# ── Styleguide ─────────────────────────────────────────────────────────


@mcp.tool(description=GENERATE_STYLEGUIDE_DESCRIPTION)
@tool_errors("generate styleguide")
async def generate_styleguide(
    course_id: str,
    include_examples: bool = True,
    custom_branding: Optional[str] = None,
) -> str:
    page = await _save_page(
        course_id,
        config.STYLEGUIDE_PAGE_URL,
        title=config.STYLEGUIDE_TITLE,
        body=build_styleguide(include_examples, custom_branding),
    )
    return "\n".join(
        [
            "Canvas styleguide created successfully!",
            f"Page URL: {page.url}",
            f"Course ID: {course_id}",
            f"View at: {config.CANVAS_BASE_URL}/courses/{course_id}/pages/{page.url}",
        ]
    )


@mcp.tool(description=GET_STYLEGUIDE_DESCRIPTION)
@tool_errors("fetch styleguide")
async def get_styleguide(course_id: str) -> str:
    styleguide = await _fetch_styleguide(course_id)
    if styleguide is None:
        raise ValueError(f"Course {course_id} has no styleguide. Create one first using generate_styleguide")
    return "\n".join(
        [
            f"Canvas Styleguide for Course {course_id}:",
            f"Title: {styleguide.title}",
            f"Last Updated: {format_timestamp(styleguide.updated_at)}",
            "",
            "--- STYLEGUIDE CONTENT ---",
            styleguide.body or "No styleguide content found",
            "--- END STYLEGUIDE ---",
        ]
    )
