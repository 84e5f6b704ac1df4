from resume_mcp.core.config import Settings
from resume_mcp.schemas.mcp import (
    MCPCapabilities,
    MCPManifest,
    MCPResource,
    MCPServerInfo,
    MCPToolSchema,
)
from resume_mcp.services.query_engine import ToolName

JSON_MIME_TYPE = "application/json"

# (file stem, uri, name, description)
RESOURCES: list[tuple[str, str, str, str]] = [
    (
        "info",
        "resume://info",
        "Personal Information",
        "Basic personal details and contact information",
    ),
    ("experiences", "resume://experiences", "All Experiences", "Complete list of work experiences"),
    ("projects", "resume://projects", "All Projects", "Complete list of projects"),
    ("skills", "resume://skills", "All Skills", "Complete list of skills"),
]


def _object_schema(**properties: str) -> dict:
    return {
        "type": "object",
        "properties": {
            name: {"type": "string", "description": description}
            for name, description in properties.items()
        },
        "required": list(properties),
    }


TOOLS: list[tuple[ToolName, str, dict]] = [
    (
        ToolName.GET_SKILLS_FOR_PROJECT,
        "Get all skills used in a specific project",
        _object_schema(project_id="Project ID"),
    ),
    (
        ToolName.GET_PROJECTS_USING_SKILL,
        "Get all projects that use a specific skill",
        _object_schema(skill_id="Skill ID"),
    ),
    (
        ToolName.GET_EXPERIENCES_USING_SKILL,
        "Get all experiences that involve a specific skill",
        _object_schema(skill_id="Skill ID"),
    ),
    (
        ToolName.GET_SHARED_SKILLS,
        "Get skills shared between two projects",
        _object_schema(project_a="First project ID", project_b="Second project ID"),
    ),
    (
        ToolName.FIND_SKILL_CLUSTERS,
        "Find clusters of skills that frequently appear together",
        _object_schema(),
    ),
    (
        ToolName.GET_EXPERIENCE_DETAILS,
        "Get full details of a specific experience",
        _object_schema(experience_id="Experience ID"),
    ),
    (
        ToolName.GET_PROJECT_DETAILS,
        "Get full details of a specific project",
        _object_schema(project_id="Project ID"),
    ),
    (
        ToolName.GET_BASIC_INFO,
        "Get basic personal information and contact details",
        _object_schema(),
    ),
    (
        ToolName.GET_RESUME_INDEXES,
        "Get the skill, project and experience relation indexes",
        _object_schema(),
    ),
]


def build_manifest(settings: Settings) -> MCPManifest:
    """Describe the resources and tools the generated site serves."""
    return MCPManifest(
        protocol_version=settings.protocol_version,
        capabilities=MCPCapabilities(
            resources=[
                MCPResource(uri=uri, name=name, description=description, mime_type=JSON_MIME_TYPE)
                for _, uri, name, description in RESOURCES
            ],
            tools=[
                MCPToolSchema(name=tool.value, description=description, input_schema=schema)
                for tool, description, schema in TOOLS
            ],
        ),
        server_info=MCPServerInfo(name=settings.app_name, version=settings.app_version),
    )
