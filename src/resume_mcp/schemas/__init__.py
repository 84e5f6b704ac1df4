from resume_mcp.schemas.mcp import (
    MCPCapabilities,
    MCPManifest,
    MCPResource,
    MCPResourceContent,
    MCPServerInfo,
    MCPToolContent,
    MCPToolResult,
    MCPToolSchema,
)
from resume_mcp.schemas.resume import (
    Experience,
    PersonalInfo,
    Project,
    Resume,
    ResumeConfig,
    Skill,
)

__all__ = [
    "Experience",
    "MCPCapabilities",
    "MCPManifest",
    "MCPResource",
    "MCPResourceContent",
    "MCPServerInfo",
    "MCPToolContent",
    "MCPToolResult",
    "MCPToolSchema",
    "PersonalInfo",
    "Project",
    "Resume",
    "ResumeConfig",
    "Skill",
]
