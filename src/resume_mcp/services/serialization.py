import json
from typing import Any

from pydantic_core import to_jsonable_python

from resume_mcp.schemas.mcp import MCPResourceContent, MCPToolContent, MCPToolResult
from resume_mcp.schemas.resume import Resume
from resume_mcp.services.manifest import JSON_MIME_TYPE, RESOURCES


def to_json(value: Any, indent: int = 2) -> str:
    """Render models, lists and dicts of models as pretty JSON using field aliases."""
    return json.dumps(to_jsonable_python(value, by_alias=True), indent=indent, ensure_ascii=False)


def wrap_tool_result(payload: Any, indent: int = 2) -> MCPToolResult:
    content = MCPToolContent(content_type="text", text=to_json(payload, indent))
    return MCPToolResult(content=[content])


def build_resources(resume: Resume, indent: int = 2) -> dict[str, MCPResourceContent]:
    """Resource snapshots keyed by file stem."""
    collections = {
        "info": resume.info,
        "experiences": resume.experiences,
        "projects": resume.projects,
        "skills": resume.skills,
    }
    return {
        stem: MCPResourceContent(
            uri=uri, mime_type=JSON_MIME_TYPE, text=to_json(collections[stem], indent)
        )
        for stem, uri, _, _ in RESOURCES
    }
