"""Unit tests for resume document schemas."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from resume_mcp.schemas.resume import Experience, Project, Resume, ResumeConfig, Skill
from tests.conftest import make_info_payload, make_resume_payload


@pytest.mark.unit
class TestExperience:
    def test_valid_experience(self) -> None:
        exp = Experience(
            id="exp1",
            title="Senior Software Engineer",
            employer="Tech Corp",
            start_date="2022-01-01T00:00:00Z",
            projects=["proj1", "proj2"],
        )
        assert exp.start_date == datetime(2022, 1, 1, tzinfo=UTC)
        assert exp.end_date is None
        assert exp.projects == ["proj1", "proj2"]

    def test_experience_minimal(self) -> None:
        exp = Experience(id="exp1", title="Dev", start_date="2020-01-01T00:00:00Z")
        assert exp.employer is None
        assert exp.projects == []

    def test_end_before_start_is_accepted(self) -> None:
        exp = Experience(
            id="exp1",
            title="Dev",
            start_date="2022-01-01T00:00:00Z",
            end_date="2021-01-01T00:00:00Z",
        )
        assert exp.end_date < exp.start_date

    def test_invalid_start_date(self) -> None:
        with pytest.raises(ValidationError):
            Experience(id="exp1", title="Dev", start_date="last spring")

    def test_naive_timestamp_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Experience(id="exp1", title="Dev", start_date="2022-01-01T00:00:00")

    def test_unix_timestamp_rejected(self) -> None:
        with pytest.raises(ValidationError, match="RFC 3339"):
            Experience(id="exp1", title="Dev", start_date=1640995200)

    def test_offset_normalized_to_utc(self) -> None:
        exp = Experience(
            id="exp1",
            title="Dev",
            start_date="2022-01-01T02:00:00+02:00",
            end_date="2023-06-30T18:00:00-05:00",
        )
        assert exp.start_date == datetime(2022, 1, 1, tzinfo=UTC)
        assert exp.start_date.utcoffset() == timedelta(0)

        dumped = exp.model_dump(mode="json")
        assert dumped["start_date"] == "2022-01-01T00:00:00Z"
        assert dumped["end_date"] == "2023-06-30T23:00:00Z"

    def test_experience_missing_required(self) -> None:
        with pytest.raises(ValidationError):
            Experience(id="exp1", title="Dev")  # missing start_date


@pytest.mark.unit
class TestProject:
    def test_project_optional_duration(self) -> None:
        project = Project(id="p1", title="Thing", description="Stuff", skills=["x"])
        assert project.duration is None

    def test_project_missing_description(self) -> None:
        with pytest.raises(ValidationError):
            Project(id="p1", title="Thing")


@pytest.mark.unit
class TestSkill:
    def test_skill_reads_type_alias(self) -> None:
        skill = Skill.model_validate(
            {"id": "rust", "name": "Rust", "type": "programming_language", "category": "backend"}
        )
        assert skill.skill_type == "programming_language"

    def test_skill_populate_by_name(self) -> None:
        skill = Skill(id="rust", name="Rust", skill_type="language", category="backend")
        assert skill.skill_type == "language"

    def test_skill_dumps_type_alias(self) -> None:
        skill = Skill(id="rust", name="Rust", skill_type="language", category="backend")
        dumped = skill.model_dump(by_alias=True)
        assert dumped["type"] == "language"
        assert "skill_type" not in dumped


@pytest.mark.unit
class TestResume:
    def test_resume_defaults(self) -> None:
        resume = Resume(info=make_info_payload())
        assert resume.experiences == []
        assert resume.projects == []
        assert resume.skills == []
        assert resume.info.links["github"] == "https://github.com/testuser"

    def test_resume_missing_info(self) -> None:
        with pytest.raises(ValidationError):
            Resume()

    def test_config_root(self) -> None:
        config = ResumeConfig.model_validate(make_resume_payload())
        assert config.resume.info.name == "Test User"
        assert len(config.resume.experiences) == 2
        assert len(config.resume.projects) == 3
        assert len(config.resume.skills) == 6
        assert config.resume.experiences[0].employer == "Tech Corp"
        assert config.resume.experiences[1].employer == "StartupCo"

    def test_config_json_roundtrip_keeps_employer(self) -> None:
        config = ResumeConfig.model_validate(make_resume_payload())
        restored = ResumeConfig.model_validate_json(config.model_dump_json(by_alias=True))
        assert restored == config
