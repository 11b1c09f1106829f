"""
Integration Tests for practitioner search.

Tests cover:
    - Text, exact and range criteria over the seed records
    - Record files named by config
"""

from __future__ import annotations

from typing import List

import pytest

from care_registry.config.loader import CONFIG_ENV_VAR, load_config_from_env
from care_registry.domain.entities import Practitioner
from care_registry.pipeline.factory import create_practitioner_pipeline
from care_registry.pipeline.search_pipeline import SearchPipeline
from care_registry.validation.criteria_validator import ValidationError


def ids(records: List[Practitioner]) -> List[str]:
    return [r.id for r in records]


class TestPractitionerSearch:
    """Integration tests for SearchPipeline over practitioners."""

    @pytest.mark.parametrize(
        "criteria, expected",
        [
            ({"specialty": "cardio"}, ["DOC001", "DOC006"]),
            ({"name": "dr. m"}, ["DOC003", "DOC006"]),
            ({"licenseNumber": "md1235"}, ["DOC006", "DOC007", "DOC008"]),
            ({"email": "HOSPITAL"}, [f"DOC00{n}" for n in range(1, 9)]),
            ({"phone": "0205"}, ["DOC005"]),
            ({"yearsOfExperience": 12}, ["DOC002"]),
            ({"yearsOfExperience": 12.5}, []),
        ],
    )
    def test_single_criterion(
        self,
        practitioner_pipeline: SearchPipeline[Practitioner],
        criteria: dict,
        expected: List[str],
    ) -> None:
        assert ids(practitioner_pipeline.search(criteria)) == expected

    @pytest.mark.parametrize(
        "experience_range, expected",
        [
            ({"min": 10, "max": 15}, ["DOC001", "DOC002", "DOC005", "DOC007"]),
            ({"min": 20}, ["DOC004", "DOC008"]),
            ({"max": 8}, ["DOC003"]),
            ({"min": 14.5, "max": 18.0}, ["DOC001", "DOC006"]),
            ({}, [f"DOC00{n}" for n in range(1, 9)]),
        ],
    )
    def test_experience_range(
        self,
        practitioner_pipeline: SearchPipeline[Practitioner],
        experience_range: dict,
        expected: List[str],
    ) -> None:
        criteria = {"yearsOfExperienceRange": experience_range}

        assert ids(practitioner_pipeline.search(criteria)) == expected

    def test_combined_criteria(
        self, practitioner_pipeline: SearchPipeline[Practitioner]
    ) -> None:
        """
        SCENARIO: Specialty fragment plus minimum experience
        EXPECTED: Only practitioners satisfying both
        """
        # Act
        result = practitioner_pipeline.search(
            {"specialty": "o", "yearsOfExperienceRange": {"min": 14}}
        )

        # Assert
        assert ids(result) == ["DOC001", "DOC004", "DOC006", "DOC007"]

    def test_text_experience_rejected(
        self, practitioner_pipeline: SearchPipeline[Practitioner]
    ) -> None:
        """
        SCENARIO: yearsOfExperience as words
        EXPECTED: ValidationError naming the field
        """
        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            practitioner_pipeline.search({"yearsOfExperience": "ten"})

        assert exc_info.value.field == "yearsOfExperience"

    def test_bool_experience_rejected(
        self, practitioner_pipeline: SearchPipeline[Practitioner]
    ) -> None:
        """Booleans are not numbers."""
        with pytest.raises(ValidationError):
            practitioner_pipeline.search({"yearsOfExperienceRange": {"min": True}})

    def test_lookup(self, practitioner_pipeline: SearchPipeline[Practitioner]) -> None:
        """Lookup by exact id."""
        assert practitioner_pipeline.get_by_id("DOC004").name == "Dr. James Wilson"
        assert practitioner_pipeline.get_by_id("doc004") is None


class TestPractitionerPipelineFactory:
    """Integration tests for create_practitioner_pipeline."""

    def test_records_from_env_config(
        self,
        monkeypatch: pytest.MonkeyPatch,
        fixtures_path,
    ) -> None:
        """
        SCENARIO: Config from the environment names a practitioner file
        EXPECTED: Pipeline serves the file's records
        """
        # Arrange
        monkeypatch.setenv(CONFIG_ENV_VAR, str(fixtures_path / "sample_config.yaml"))
        config = load_config_from_env()

        # Act
        pipeline = create_practitioner_pipeline(config)

        # Assert
        assert len(pipeline.store) == 2
        assert ids(pipeline.search({"licenseNumber": "navy"})) == ["PR001"]
        assert ids(pipeline.search({"yearsOfExperienceRange": {"max": 100}})) == ["PR001"]
        assert ids(pipeline.search({"yearsOfExperienceRange": {}})) == ["PR001", "PR002"]
