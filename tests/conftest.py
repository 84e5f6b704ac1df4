import json
from pathlib import Path

import pytest

from resume_mcp.core.config import Settings, get_settings
from resume_mcp.schemas.resume import Resume
from resume_mcp.services.index_builder import ResumeIndex, build_index
from resume_mcp.storage.local import LocalFileStorage

SAMPLE_DATA_DIR = Path(__file__).parent.parent / "sample_data"


def make_info_payload(**overrides) -> dict:
    """Helper to create valid personal info."""
    data = {
        "name": "Test User",
        "location": "San Francisco, CA",
        "phone_number": "+1-555-0123",
        "email": "test@example.com",
        "links": {
            "github": "https://github.com/testuser",
            "linkedin": "https://linkedin.com/in/testuser",
        },
    }
    data.update(overrides)
    return data


def make_experience_payload(exp_id: str, projects: list[str], **overrides) -> dict:
    data = {
        "id": exp_id,
        "title": "Software Engineer",
        "employer": "Tech Corp",
        "start_date": "2022-01-01T00:00:00Z",
        "end_date": None,
        "projects": projects,
    }
    data.update(overrides)
    return data


def make_project_payload(project_id: str, skills: list[str], **overrides) -> dict:
    data = {
        "id": project_id,
        "title": f"Project {project_id}",
        "duration": "3 months",
        "description": f"Description of {project_id}",
        "skills": skills,
    }
    data.update(overrides)
    return data


def make_skill_payload(skill_id: str, **overrides) -> dict:
    data = {
        "id": skill_id,
        "name": skill_id.capitalize(),
        "type": "tool",
        "category": "backend",
    }
    data.update(overrides)
    return data


def make_resume(
    projects: dict[str, list[str]] | None = None,
    experiences: dict[str, list[str]] | None = None,
    skills: list[str] | None = None,
) -> Resume:
    """Build a resume from ``{project_id: skill_ids}`` and ``{experience_id: project_ids}``.

    Skills default to every skill id referenced by a project.
    """
    projects = projects or {}
    experiences = experiences or {}
    if skills is None:
        skills = sorted({s for skill_ids in projects.values() for s in skill_ids})

    return Resume.model_validate(
        {
            "info": make_info_payload(),
            "experiences": [make_experience_payload(e, p) for e, p in experiences.items()],
            "projects": [make_project_payload(p, s) for p, s in projects.items()],
            "skills": [make_skill_payload(s) for s in skills],
        }
    )


def make_resume_payload() -> dict:
    """The sample document used throughout the tests, as raw JSON data."""
    return json.loads((SAMPLE_DATA_DIR / "config.json").read_text(encoding="utf-8"))


@pytest.fixture
def sample_config_path() -> Path:
    return SAMPLE_DATA_DIR / "config.json"


@pytest.fixture
def resume() -> Resume:
    return Resume.model_validate(make_resume_payload()["resume"])


@pytest.fixture
def index(resume: Resume) -> ResumeIndex:
    return build_index(resume)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,  # Prevent reading .env file during tests
    )


@pytest.fixture
def storage(tmp_path: Path) -> LocalFileStorage:
    return LocalFileStorage(str(tmp_path / "dist"))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
