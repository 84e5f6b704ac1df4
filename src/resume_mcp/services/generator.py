import logging
from typing import Any

from resume_mcp.core.config import Settings, get_settings
from resume_mcp.schemas.resume import Resume
from resume_mcp.services.index_builder import ResumeIndex, build_index
from resume_mcp.services.manifest import build_manifest
from resume_mcp.services.query_engine import (
    NO_ARGUMENT_TOOLS,
    ToolKey,
    ToolName,
    ToolResults,
    precompute_tool_results,
)
from resume_mcp.services.serialization import build_resources, to_json, wrap_tool_result
from resume_mcp.storage.base import FileStorage

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "mcp.json"
RESOURCES_DIR = "resources"
TOOLS_DIR = "tools"
INDEXES_DIR = "indexes"


def tool_result_path(tool: ToolName, key: ToolKey) -> tuple[str, str]:
    """Return ``(subdir, filename)`` for a tool result.

    ``tools/<tool>.json`` for tools without arguments, ``tools/<tool>/<id>.json``
    for single-id tools and ``tools/<tool>/<a>/<b>.json`` for pairs.
    """
    parts = (TOOLS_DIR, tool.value, *key)
    return "/".join(parts[:-1]), f"{parts[-1]}.json"


class StaticSiteGenerator:
    def __init__(
        self,
        resume: Resume,
        storage: FileStorage,
        settings: Settings | None = None,
    ) -> None:
        self.resume = resume
        self.storage = storage
        self.settings = settings or get_settings()
        self.index: ResumeIndex = build_index(resume)

    async def _write_json(self, value: Any, filename: str, subdir: str = "") -> str:
        content = to_json(value, self.settings.json_indent).encode("utf-8")
        return await self.storage.save(content, filename, subdir=subdir)

    async def generate(self) -> None:
        """Write the manifest, resources, tool results and indexes."""
        # Compute everything up front so nothing is written if a query fails
        tool_results = precompute_tool_results(self.resume, self.index)

        for subdir in (RESOURCES_DIR, TOOLS_DIR, INDEXES_DIR):
            await self.storage.makedirs(subdir)

        await self.generate_manifest()
        await self.generate_resources()
        await self.generate_tool_results(tool_results)
        await self.generate_indexes()

        logger.info("Static MCP site generated for %s", self.resume.info.name)

    async def generate_manifest(self) -> None:
        manifest = build_manifest(self.settings)
        await self._write_json(manifest, MANIFEST_FILENAME)
        logger.debug("Wrote manifest with %d tools", len(manifest.capabilities.tools))

    async def generate_resources(self) -> None:
        resources = build_resources(self.resume, self.settings.json_indent)
        for stem, content in resources.items():
            await self._write_json(content, f"{stem}.json", subdir=RESOURCES_DIR)
        logger.debug("Wrote %d resources", len(resources))

    async def generate_tool_results(self, tool_results: ToolResults | None = None) -> None:
        if tool_results is None:
            tool_results = precompute_tool_results(self.resume, self.index)

        for tool in ToolName:
            if tool not in NO_ARGUMENT_TOOLS:
                await self.storage.makedirs(f"{TOOLS_DIR}/{tool.value}")
        shared_dir = f"{TOOLS_DIR}/{ToolName.GET_SHARED_SKILLS.value}"
        for project_id in self.index.project_lookup:
            await self.storage.makedirs(f"{shared_dir}/{project_id}")

        written = 0
        for tool, by_key in tool_results.items():
            for key, payload in by_key.items():
                subdir, filename = tool_result_path(tool, key)
                result = wrap_tool_result(payload, self.settings.json_indent)
                await self._write_json(result, filename, subdir=subdir)
                written += 1
        logger.info("Wrote %d tool result files", written)

    async def generate_indexes(self) -> None:
        for stem, relation in self.index.relations().items():
            await self._write_json(relation, f"{stem}.json", subdir=INDEXES_DIR)
