import logging
from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel

from resume_mcp.schemas.resume import Experience, Project, Resume, Skill

logger = logging.getLogger(__name__)

_Entity = TypeVar("_Entity", Experience, Project, Skill)


class ResumeIndex(BaseModel):
    """Relation indexes plus id -> entity lookups derived from a resume."""

    skill_to_projects: dict[str, list[str]] = {}
    skill_to_experiences: dict[str, list[str]] = {}
    project_to_experiences: dict[str, list[str]] = {}
    experience_lookup: dict[str, Experience] = {}
    project_lookup: dict[str, Project] = {}
    skill_lookup: dict[str, Skill] = {}

    def relations(self) -> dict[str, dict[str, list[str]]]:
        """The three relation indexes keyed by their file stem."""
        return {
            "skill_to_projects": self.skill_to_projects,
            "skill_to_experiences": self.skill_to_experiences,
            "project_to_experiences": self.project_to_experiences,
        }


def _build_lookup(kind: str, entities: Iterable[_Entity]) -> dict[str, _Entity]:
    lookup: dict[str, _Entity] = {}
    for entity in entities:
        if entity.id in lookup:
            # Last one wins; earlier entries with the same id are lost.
            logger.warning("Duplicate %s id %r, keeping the last definition", kind, entity.id)
        lookup[entity.id] = entity
    return lookup


def _sorted_unique(ids: list[str]) -> list[str]:
    result: list[str] = []
    for item in sorted(ids):
        if not result or result[-1] != item:
            result.append(item)
    return result


def build_index(resume: Resume) -> ResumeIndex:
    """Build all lookups and relation indexes for a resume.

    Only ``skill_to_experiences`` is sorted and deduplicated, since an
    experience can reach the same skill through several projects. The other
    relation indexes keep insertion order and raw multiplicity.
    """
    experience_lookup = _build_lookup("experience", resume.experiences)
    project_lookup = _build_lookup("project", resume.projects)
    skill_lookup = _build_lookup("skill", resume.skills)

    skill_to_projects: dict[str, list[str]] = {}
    for project in resume.projects:
        for skill_id in project.skills:
            skill_to_projects.setdefault(skill_id, []).append(project.id)

    skill_to_experiences: dict[str, list[str]] = {}
    project_to_experiences: dict[str, list[str]] = {}
    for experience in resume.experiences:
        for project_id in experience.projects:
            project_to_experiences.setdefault(project_id, []).append(experience.id)

            project = project_lookup.get(project_id)
            if project is None:
                logger.debug(
                    "Experience %r references unknown project %r", experience.id, project_id
                )
                continue
            for skill_id in project.skills:
                skill_to_experiences.setdefault(skill_id, []).append(experience.id)

    skill_to_experiences = {
        skill_id: _sorted_unique(ids) for skill_id, ids in skill_to_experiences.items()
    }

    return ResumeIndex(
        skill_to_projects=skill_to_projects,
        skill_to_experiences=skill_to_experiences,
        project_to_experiences=project_to_experiences,
        experience_lookup=experience_lookup,
        project_lookup=project_lookup,
        skill_lookup=skill_lookup,
    )
