from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MCPResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uri: str
    name: str
    description: str
    mime_type: str = Field("application/json", alias="mimeType")


class MCPToolSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(..., alias="inputSchema")


class MCPCapabilities(BaseModel):
    resources: list[MCPResource] = []
    tools: list[MCPToolSchema] = []


class MCPServerInfo(BaseModel):
    name: str
    version: str


class MCPManifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(..., alias="protocolVersion")
    capabilities: MCPCapabilities
    server_info: MCPServerInfo = Field(..., alias="serverInfo")


class MCPResourceContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uri: str
    mime_type: str = Field("application/json", alias="mimeType")
    text: str


class MCPToolContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content_type: str = Field("text", alias="type")
    text: str


class MCPToolResult(BaseModel):
    content: list[MCPToolContent]
