import json
import logging
from pathlib import Path

from pydantic import ValidationError

from resume_mcp.core.exceptions import DocumentError
from resume_mcp.schemas.resume import Resume, ResumeConfig

logger = logging.getLogger(__name__)


def parse_resume_document(raw: str, source: str = "<string>") -> Resume:
    """Validate a JSON document of the form ``{"resume": {...}}``."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentError(f"{source} is not valid JSON: {e}") from e

    try:
        config = ResumeConfig.model_validate(data)
    except ValidationError as e:
        raise DocumentError(f"{source} does not match the resume schema:\n{e}") from e

    resume = config.resume
    logger.info(
        "Loaded resume for %s from %s: %d experiences, %d projects, %d skills",
        resume.info.name,
        source,
        len(resume.experiences),
        len(resume.projects),
        len(resume.skills),
    )
    return resume


def load_resume(file_path: Path) -> Resume:
    try:
        raw = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentError(f"Config file not found: {file_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Failed to read config file {file_path}: {e}") from e
    return parse_resume_document(raw, source=str(file_path))
