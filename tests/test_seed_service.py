from pathlib import Path

import pytest

from exceptions import SeedDataError
from models import College, Student, StudentCourse
from services import SeedService

SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "seed.yml"


def test_bundled_seed_file_is_valid():
    assert SeedService.validate_yaml(str(SEED_FILE)) == []


def test_invalid_seed_file_reports_errors(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("colleges:\n  - {id: 1, name: Tech}\n", encoding="utf-8")

    errors = SeedService.validate_yaml(str(path))

    assert len(errors) == 1
    assert "fees" in errors[0]


def test_import_rejects_invalid_file(tx, tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("students:\n  - {id: 1, name: Amy, age: old}\n", encoding="utf-8")

    with pytest.raises(SeedDataError):
        SeedService(tx).import_from_yaml(str(path))
    assert tx.session.query(Student).count() == 0


def test_import_seed_file_commits_all_records(tx):
    stats = SeedService(tx).import_from_yaml(str(SEED_FILE))

    assert stats['colleges'] == {'created': 4, 'skipped': 0}
    assert stats['students'] == {'created': 5, 'skipped': 0}
    assert stats['enrollments'] == {'created': 4, 'skipped': 0}
    assert tx.pending_changes == 0

    tx.rollback()
    assert tx.session.query(College).count() == 4
    assert tx.session.query(StudentCourse).count() == 4


def test_reimport_skips_existing_records(tx):
    SeedService(tx).import_from_yaml(str(SEED_FILE))
    stats = SeedService(tx).import_from_yaml(str(SEED_FILE))

    assert all(section['created'] == 0 for section in stats.values())
    assert stats['offerings'] == {'created': 0, 'skipped': 5}
