"""
Unit Tests for InMemoryRecordStore, RecordLoader and seed data.

Test Aspects Covered:
    ✅ Business Logic: Ordered storage, id lookup
    ✅ Error Handling: Duplicate ids, malformed record files
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pydantic
import pytest

from care_registry.adapters.record_loader import RecordLoader
from care_registry.adapters.record_store import InMemoryRecordStore
from care_registry.adapters.seed_data import seed_patients, seed_practitioners
from care_registry.domain.entities import Gender, Patient, Practitioner


class TestInMemoryRecordStore:
    """Test cases for InMemoryRecordStore."""

    def test_preserves_insertion_order(self, sparse_patients: List[Patient]) -> None:
        """Records come back in the order given."""
        store = InMemoryRecordStore(reversed(sparse_patients))

        assert [r.id for r in store.records] == ["S003", "S002", "S001"]
        assert len(store) == 3

    def test_get_by_id_returns_same_record(self, sparse_patients: List[Patient]) -> None:
        """
        SCENARIO: Every record looked up by its own id
        EXPECTED: The identical record object
        """
        # Arrange
        store = InMemoryRecordStore(sparse_patients)

        # Act & Assert
        for record in sparse_patients:
            assert store.get_by_id(record.id) is record

    def test_get_by_id_missing(self, sparse_patients: List[Patient]) -> None:
        """Unknown and differently-cased ids are not found."""
        store = InMemoryRecordStore(sparse_patients)

        assert store.get_by_id("nonexistent") is None
        assert store.get_by_id("s001") is None
        assert "S001" in store
        assert "s001" not in store

    def test_duplicate_ids_rejected(self, sparse_patients: List[Patient]) -> None:
        """
        SCENARIO: Two records share an id
        EXPECTED: ValueError at construction
        """
        # Arrange
        duplicate = sparse_patients[0].model_copy(update={"name": "Someone Else"})

        # Act & Assert
        with pytest.raises(ValueError, match="S001"):
            InMemoryRecordStore([*sparse_patients, duplicate])

    def test_get_many_keeps_requested_order(self, sparse_patients: List[Patient]) -> None:
        """Ids resolve in the requested order; unknown ids are skipped."""
        store = InMemoryRecordStore(sparse_patients)

        records = store.get_many(["S003", "missing", "S001"])

        assert [r.id for r in records] == ["S003", "S001"]

    def test_records_are_immutable(self, sparse_patients: List[Patient]) -> None:
        """Records cannot be mutated through the store."""
        store = InMemoryRecordStore(sparse_patients)

        with pytest.raises(pydantic.ValidationError):
            store.records[0].name = "Changed"
        assert isinstance(store.records, tuple)


class TestSeedData:
    """Test cases for the built-in records."""

    def test_seed_patients(self) -> None:
        """Eight patients with unique ids."""
        patients = seed_patients()

        assert len(patients) == 8
        assert len({p.id for p in patients}) == 8
        assert patients[1].name == "Sarah Johnson"
        assert patients[0].phone == "+1-555-0101"

    def test_seed_practitioners(self) -> None:
        """Eight practitioners with unique ids."""
        practitioners = seed_practitioners()

        assert len(practitioners) == 8
        assert practitioners[0].license_number == "MD12345"
        assert practitioners[-1].years_of_experience == 22

    def test_payload_uses_camel_case(self) -> None:
        """Serialized records use camelCase keys and enum values."""
        payload = seed_patients()[0].to_payload()

        assert payload["dateOfBirth"] == "1985-03-15"
        assert payload["gender"] == "male"
        assert "date_of_birth" not in payload

    def test_payload_omits_absent_fields(self) -> None:
        """Absent optional fields are left out of the payload."""
        practitioner = Practitioner(id="X", name="Dr. X", specialty="Surgery")

        assert practitioner.to_payload() == {"id": "X", "name": "Dr. X", "specialty": "Surgery"}


class TestRecordLoader:
    """Test cases for RecordLoader."""

    def test_loads_patients(self, fixtures_path: Path) -> None:
        """
        SCENARIO: YAML list of patients with camelCase keys
        EXPECTED: Validated Patient records in file order
        """
        # Arrange
        loader = RecordLoader(base_path=fixtures_path)

        # Act
        patients = loader.load("sample_patients.yaml", Patient)

        # Assert
        assert [p.id for p in patients] == ["T001", "T002"]
        assert patients[0].gender is Gender.FEMALE
        assert patients[1].email is None

    def test_loads_practitioners(self, fixtures_path: Path) -> None:
        """Sparse practitioner entries keep absent fields as None."""
        practitioners = RecordLoader().load(
            fixtures_path / "sample_practitioners.yaml", Practitioner
        )

        assert practitioners[0].years_of_experience == 40
        assert practitioners[1].years_of_experience is None

    def test_rejects_non_list(self, tmp_path: Path) -> None:
        """A mapping at the top level is not a record list."""
        (tmp_path / "records.yaml").write_text("id: P1\nname: One\n")

        with pytest.raises(ValueError, match="must contain a list"):
            RecordLoader(base_path=tmp_path).load("records.yaml", Patient)

    def test_rejects_invalid_record(self, tmp_path: Path) -> None:
        """An entry with an unknown gender fails validation."""
        (tmp_path / "records.yaml").write_text(
            "- id: P1\n  name: One\n  dateOfBirth: '2000-01-01'\n  gender: robot\n"
        )

        with pytest.raises(pydantic.ValidationError):
            RecordLoader(base_path=tmp_path).load("records.yaml", Patient)

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file holds no records."""
        (tmp_path / "records.yaml").write_text("")

        assert RecordLoader(base_path=tmp_path).load("records.yaml", Patient) == []
