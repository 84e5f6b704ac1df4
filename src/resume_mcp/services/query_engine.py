"""Precomputed answers for every read-only tool of the resume MCP surface.

Each query function is pure given the resume and its index. Ids that do not
resolve through the matching lookup are dropped from results rather than
raising.
"""

import logging
from collections.abc import Callable, Iterable
from enum import StrEnum
from itertools import combinations
from typing import Any

from resume_mcp.schemas.resume import Experience, PersonalInfo, Project, Resume, Skill
from resume_mcp.services.index_builder import ResumeIndex

logger = logging.getLogger(__name__)

CLUSTER_KEY_SEPARATOR = ","


class ToolName(StrEnum):
    GET_SKILLS_FOR_PROJECT = "get_skills_for_project"
    GET_PROJECTS_USING_SKILL = "get_projects_using_skill"
    GET_EXPERIENCES_USING_SKILL = "get_experiences_using_skill"
    GET_SHARED_SKILLS = "get_shared_skills"
    FIND_SKILL_CLUSTERS = "find_skill_clusters"
    GET_EXPERIENCE_DETAILS = "get_experience_details"
    GET_PROJECT_DETAILS = "get_project_details"
    GET_BASIC_INFO = "get_basic_info"
    GET_RESUME_INDEXES = "get_resume_indexes"


NO_ARGUMENT_TOOLS = frozenset(
    {ToolName.FIND_SKILL_CLUSTERS, ToolName.GET_BASIC_INFO, ToolName.GET_RESUME_INDEXES}
)

# () for tools without arguments, (id,) or (id_a, id_b) otherwise
ToolKey = tuple[str, ...]
ToolResults = dict[ToolName, dict[ToolKey, Any]]


def _resolve(ids: Iterable[str], lookup: dict[str, Any]) -> list[Any]:
    return [lookup[i] for i in ids if i in lookup]


def skills_for_project(project: Project, index: ResumeIndex) -> list[Skill]:
    return _resolve(project.skills, index.skill_lookup)


def projects_using_skill(skill_id: str, index: ResumeIndex) -> list[Project]:
    return _resolve(index.skill_to_projects.get(skill_id, []), index.project_lookup)


def experiences_using_skill(skill_id: str, index: ResumeIndex) -> list[Experience]:
    return _resolve(index.skill_to_experiences.get(skill_id, []), index.experience_lookup)


def shared_skills(project_a: Project, project_b: Project, index: ResumeIndex) -> list[Skill]:
    """Skills used by both projects, ordered by skill id.

    The result depends only on the two skill sets, so swapping the arguments
    yields an identical list.
    """
    shared = set(project_a.skills) & set(project_b.skills)
    return _resolve(sorted(shared), index.skill_lookup)


def skill_cluster_key(skill_ids: Iterable[str]) -> str:
    return CLUSTER_KEY_SEPARATOR.join(sorted(skill_ids))


def find_skill_clusters(projects: Iterable[Project]) -> dict[str, list[str]]:
    """Group projects by the skill combinations they share.

    Every pair of skills in a project is a combination, and so is the full
    skill set of a project with three or more skills. Combinations produced
    by a single project are not clusters and are left out.
    """
    combos: dict[str, list[str]] = {}
    for project in projects:
        if len(project.skills) < 2:
            continue

        keys = [skill_cluster_key(pair) for pair in combinations(project.skills, 2)]
        if len(project.skills) >= 3:
            keys.append(skill_cluster_key(project.skills))

        for key in keys:
            contributors = combos.setdefault(key, [])
            # A project counts once per combination
            if project.id not in contributors:
                contributors.append(project.id)

    return {key: project_ids for key, project_ids in combos.items() if len(project_ids) > 1}


def experience_details(experience_id: str, index: ResumeIndex) -> Experience | None:
    return index.experience_lookup.get(experience_id)


def project_details(project_id: str, index: ResumeIndex) -> Project | None:
    return index.project_lookup.get(project_id)


def basic_info(resume: Resume) -> PersonalInfo:
    return resume.info


def resume_indexes(index: ResumeIndex) -> dict[str, dict[str, list[str]]]:
    return index.relations()


def _per_key(keys: Iterable[str], compute: Callable[[str], Any]) -> dict[ToolKey, Any]:
    return {(key,): compute(key) for key in keys}


def _shared_skill_pairs(projects: list[Project], index: ResumeIndex) -> dict[ToolKey, Any]:
    results: dict[ToolKey, Any] = {}
    for i, project_a in enumerate(projects):
        for project_b in projects[i + 1 :]:
            shared = shared_skills(project_a, project_b, index)
            results[(project_a.id, project_b.id)] = shared
            results[(project_b.id, project_a.id)] = shared
    return results


def precompute_tool_results(resume: Resume, index: ResumeIndex) -> ToolResults:
    """Run every tool over its full key space.

    Key spaces come from the identity lookups, so a duplicated id yields one
    key answered from its last definition.
    """
    projects = list(index.project_lookup.values())
    skill_ids = list(index.skill_lookup)
    experience_ids = list(index.experience_lookup)

    results: ToolResults = {
        ToolName.GET_SKILLS_FOR_PROJECT: {
            (project.id,): skills_for_project(project, index) for project in projects
        },
        ToolName.GET_PROJECTS_USING_SKILL: _per_key(
            skill_ids, lambda s: projects_using_skill(s, index)
        ),
        ToolName.GET_EXPERIENCES_USING_SKILL: _per_key(
            skill_ids, lambda s: experiences_using_skill(s, index)
        ),
        ToolName.GET_SHARED_SKILLS: _shared_skill_pairs(projects, index),
        ToolName.FIND_SKILL_CLUSTERS: {(): find_skill_clusters(projects)},
        ToolName.GET_EXPERIENCE_DETAILS: _per_key(
            experience_ids, lambda e: experience_details(e, index)
        ),
        ToolName.GET_PROJECT_DETAILS: _per_key(
            index.project_lookup, lambda p: project_details(p, index)
        ),
        ToolName.GET_BASIC_INFO: {(): basic_info(resume)},
        ToolName.GET_RESUME_INDEXES: {(): resume_indexes(index)},
    }

    logger.info(
        "Precomputed %d tool results across %d tools",
        sum(len(by_key) for by_key in results.values()),
        len(results),
    )
    return results
