"""Course modules and module items."""

from mcp_servers.servers.canvas.app import get_canvas, mcp
from mcp_servers.servers.canvas.canvas_descriptions import (
    LIST_MODULE_ITEMS_DESCRIPTION,
    LIST_MODULES_DESCRIPTION,
    TOGGLE_MODULE_PUBLISH_DESCRIPTION,
)
from mcp_servers.servers.canvas.formatting import paragraph, render_list, tool_errors, yes_no
from mcp_servers.servers.canvas.models import Module, ModuleItem


def _format_module(module: Module, include_items: bool) -> str:
    lines = [
        f"Module: {module.name}",
        f"ID: {module.id}",
        f"Position: {module.position}",
        f"Published: {yes_no(module.published)}",
    ]
    if include_items and module.items:
        lines.append("Items:")
        for item in module.items:
            lines.append(f"  - [{item.type}] {item.label} (ID: {item.id})")
    return paragraph(lines)


def _format_item(item: ModuleItem) -> str:
    return paragraph(
        [
            f"Type: {item.type}",
            f"Title: {item.label}",
            f"ID: {item.id}",
            f"Position: {item.position}",
            f"Published: {yes_no(item.published)}",
        ]
    )


@mcp.tool(description=LIST_MODULES_DESCRIPTION)
@tool_errors("fetch modules")
async def list_modules(course_id: str, include_items: bool = False) -> str:
    canvas = get_canvas()
    params = {"include[]": ["items"]} if include_items else {}
    raw = await canvas.fetch_all(f"/api/v1/courses/{course_id}/modules", params)

    modules = [Module.model_validate(m) for m in raw]
    return render_list(
        f"Modules in course {course_id}:",
        [_format_module(m, include_items) for m in modules],
        "No modules found in this course.",
    )


@mcp.tool(description=LIST_MODULE_ITEMS_DESCRIPTION)
@tool_errors("fetch module items")
async def list_module_items(course_id: str, module_id: str) -> str:
    canvas = get_canvas()
    raw = await canvas.fetch_all(f"/api/v1/courses/{course_id}/modules/{module_id}/items")

    items = [ModuleItem.model_validate(i) for i in raw]
    return render_list(
        f"Items in module {module_id} (course {course_id}):",
        [_format_item(i) for i in items],
        "No items found in this module.",
    )


@mcp.tool(description=TOGGLE_MODULE_PUBLISH_DESCRIPTION)
@tool_errors("toggle module publish")
async def toggle_module_publish(course_id: str, module_id: str) -> str:
    canvas = get_canvas()
    path = f"/api/v1/courses/{course_id}/modules/{module_id}"
    current = Module.model_validate(await canvas.fetch(path))

    published = not current.published
    await canvas.replace(path, {"module": {"published": published}})

    state = "published" if published else "unpublished"
    return f"Module {module_id} in course {course_id} is now {state}."
