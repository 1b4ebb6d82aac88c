"""Unit tests for CsvFileRecordStorage."""

import pytest

from health_assistant.domain.health_profile.core.exceptions.domain_errors import (
    HealthDomainError,
    SourceDecodeError,
    SourceEmptyError,
    SourceMissingError,
)
from health_assistant.infrastructure.record_source.csv_storage import CsvFileRecordStorage

JOHN = "john,male,28,72,91,43,,172,sedentary"
JANE = "jane,female,23,61,68,36,70,170,moderate"


@pytest.fixture
def storage(tmp_path) -> CsvFileRecordStorage:
    return CsvFileRecordStorage(base_dir=tmp_path)


class TestReadLines:
    def test_reads_lines(self, storage, tmp_path):
        (tmp_path / "users.csv").write_text(f"{JOHN}\n{JANE}\n")

        assert storage.read_lines("users.csv") == [JOHN, JANE]

    def test_trailing_blank_lines_tolerated(self, storage, tmp_path):
        (tmp_path / "users.csv").write_text(f"{JOHN}\n\n\n")

        assert storage.read_lines("users.csv") == [JOHN]

    def test_missing_file(self, storage):
        with pytest.raises(SourceMissingError) as exc_info:
            storage.read_lines("nope.csv")

        assert exc_info.value.source == "nope.csv"

    def test_empty_file(self, storage, tmp_path):
        (tmp_path / "empty.csv").write_text("")

        with pytest.raises(SourceEmptyError):
            storage.read_lines("empty.csv")

    def test_invalid_utf8(self, storage, tmp_path):
        (tmp_path / "users.csv").write_bytes(b"j\xff,male,28,72,91,43,,172,sedentary\n")

        with pytest.raises(SourceDecodeError) as exc_info:
            storage.read_lines("users.csv")

        assert isinstance(exc_info.value, HealthDomainError)
        assert exc_info.value.source == "users.csv"

    def test_absolute_path_ignores_base_dir(self, tmp_path):
        path = tmp_path / "abs.csv"
        path.write_text(JOHN)

        assert CsvFileRecordStorage(base_dir="/nonexistent").read_lines(str(path)) == [JOHN]


class TestAppendLines:
    def test_creates_file(self, storage, tmp_path):
        storage.append_lines("out.csv", [JOHN])

        assert (tmp_path / "out.csv").read_text() == f"{JOHN}\n"

    def test_never_truncates(self, storage, tmp_path):
        storage.append_lines("out.csv", [JOHN])
        storage.append_lines("out.csv", [JANE])

        assert storage.read_lines("out.csv") == [JOHN, JANE]

    def test_empty_append_leaves_content(self, storage, tmp_path):
        storage.append_lines("out.csv", [JOHN])
        storage.append_lines("out.csv", [])

        assert storage.read_lines("out.csv") == [JOHN]


class TestBaseDir:
    def test_defaults_to_data_dir_setting(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HEALTH_DATA_DIR", str(tmp_path))
        (tmp_path / "users.csv").write_text(f"{JOHN}\n")

        assert CsvFileRecordStorage().read_lines("users.csv") == [JOHN]

    def test_relative_to_cwd_without_setting(self, monkeypatch, tmp_path):
        monkeypatch.delenv("HEALTH_DATA_DIR", raising=False)
        monkeypatch.chdir(tmp_path)

        storage = CsvFileRecordStorage()
        storage.append_lines("out.csv", [JANE])

        assert storage.base_dir is None
        assert (tmp_path / "out.csv").read_text() == f"{JANE}\n"
