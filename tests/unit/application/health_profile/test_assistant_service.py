"""Unit tests for HealthAssistantService."""

import pytest
from structlog.testing import capture_logs

from health_assistant.application.health_profile.commands.assistant_service import (
    NO_USER_IN_LIST,
    USER_NOT_FOUND,
    HealthAssistantService,
)
from health_assistant.domain.health_profile.core.entities.user_record import UserRecord
from health_assistant.domain.health_profile.core.exceptions.domain_errors import (
    SourceMissingError,
)
from health_assistant.domain.health_profile.core.value_objects import BfpMethod
from health_assistant.infrastructure.persistence.in_memory.user_record_store import (
    InMemoryUserRecordStore,
)
from health_assistant.infrastructure.record_source.in_memory_storage import (
    InMemoryRecordStorage,
)


@pytest.fixture
def store() -> InMemoryUserRecordStore:
    return InMemoryUserRecordStore()


@pytest.fixture
def storage() -> InMemoryRecordStorage:
    return InMemoryRecordStorage()


@pytest.fixture
def john() -> UserRecord:
    return UserRecord.create("John", "male", 30, 70, 175, 80, 38, "moderate")


@pytest.fixture
def jane() -> UserRecord:
    return UserRecord.create("Jane", "female", 25, 57.8, 170, 70, 32, "active", hip=95)


class TestCompute:
    def test_compute_steps_individually(self, store, storage, john):
        assistant = HealthAssistantService(store, BfpMethod.US_NAVY, storage)
        assistant.add_user(john)

        body_fat = assistant.compute_bfp("john")
        calories = assistant.compute_daily_calories("john")
        macros = assistant.compute_meal_prep("john")

        assert body_fat.category == "USNavy: Normal"
        assert calories == 2800
        assert macros.carbs_g == 350.0
        assert john.protein_g == macros.protein_g

    def test_compute_all(self, store, storage, john):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)
        assistant.add_user(john)

        result = assistant.compute_all("john")

        assert result.body_fat.category == "Bmi: Normal"
        assert john.daily_calories == 2800

    def test_absent_user_is_reported_not_raised(self, store, storage):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)

        assert assistant.compute_bfp("ghost") is None
        assert assistant.compute_daily_calories("ghost") is None
        assert assistant.compute_meal_prep("ghost") is None
        assert assistant.compute_all("ghost") is None

    def test_instances_share_an_injected_store(self, store, storage, john):
        navy = HealthAssistantService(store, BfpMethod.US_NAVY, storage)
        bmi = HealthAssistantService(store, "bmi", storage)

        navy.add_user(john)
        bmi.compute_bfp("john")

        assert navy.store is bmi.store
        assert john.body_fat_category == "Bmi: Normal"
        assert bmi.method is BfpMethod.BMI

    def test_separate_stores_are_independent(self, storage, john):
        first = HealthAssistantService(InMemoryUserRecordStore(), BfpMethod.BMI, storage)
        second = HealthAssistantService(InMemoryUserRecordStore(), BfpMethod.BMI, storage)

        first.add_user(john)

        assert second.compute_bfp("john") is None


class TestDisplay:
    def test_empty_roster(self, store, storage):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)

        assert assistant.display("john") == NO_USER_IN_LIST

    def test_unknown_user(self, store, storage, john):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)
        assistant.add_user(john)

        assert assistant.display("jack") == USER_NOT_FOUND

    def test_one_user(self, store, storage, john):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)
        assistant.add_user(john)

        text = assistant.display("john")

        assert "Name: john" in text
        assert "BEGIN ALL USER" not in text

    def test_all_users(self, store, storage, john, jane):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)
        assistant.add_user(john)
        assistant.add_user(jane)

        text = assistant.display("all")

        assert "BEGIN ALL USER" in text
        assert text.index("Name: john") < text.index("Name: jane")


class TestDelete:
    def test_delete_user(self, store, storage, john, jane):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)
        assistant.add_user(john)
        assistant.add_user(jane)

        assert assistant.delete_user("john") is True
        assert assistant.delete_user("john") is False
        assert [r.name for r in store.list_all()] == ["jane"]

    def test_delete_unknown_user_is_reported(self, store, storage, john):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)

        with capture_logs() as logs:
            assert assistant.delete_user("ghost") is False
            assistant.add_user(john)
            assert assistant.delete_user("ghost") is False

        events = [log["event"] for log in logs if log["log_level"] == "warning"]
        assert events == [NO_USER_IN_LIST, USER_NOT_FOUND]


class TestSerialization:
    def test_serialize_appends_raw_fields(self, store, storage, john, jane):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)
        assistant.add_user(john)
        assistant.add_user(jane)
        assistant.compute_all("john")

        assert assistant.serialize("out.csv") == 2
        assistant.serialize("out.csv")

        assert storage.lines("out.csv") == [
            "john,male,30,70,80,38,,175,moderate",
            "jane,female,25,57.8,70,32,95,170,active",
        ] * 2

    def test_read_from_file_adds_raw_records(self, store, storage):
        storage.append_lines("in.csv", ["john,male,30,70,80,38,,175,moderate"])
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)

        records = assistant.read_from_file("in.csv")

        assert store.list_all() == records
        assert records[0].body_fat_category is None
        assert records[0].daily_calories == 0

    def test_mass_load_and_compute(self, store, storage):
        storage.append_lines("in.csv", ["john,male,30,70,80,38,,175,moderate"])
        assistant = HealthAssistantService(store, BfpMethod.US_NAVY, storage)

        assistant.mass_load_and_compute("in.csv")

        record = store.find_by_name("john")
        assert record.body_fat_category == "USNavy: Normal"
        assert record.daily_calories == 2800

    def test_missing_source(self, store, storage):
        assistant = HealthAssistantService(store, BfpMethod.BMI, storage)

        with pytest.raises(SourceMissingError):
            assistant.mass_load_and_compute("nope.csv")
        assert store.count() == 0
