"""HealthAssistantService - per-user operations on an injected roster."""

from typing import List, Optional

import structlog

from health_assistant.application.health_profile.commands.batch_loader import (
    BatchLoader,
)
from health_assistant.application.health_profile.orchestrators.metrics_orchestrator import (
    MetricsCalculations,
    MetricsOrchestrator,
)
from health_assistant.domain.health_profile.core.entities.user_record import UserRecord
from health_assistant.domain.health_profile.core.ports.record_source import (
    IRecordStorage,
)
from health_assistant.domain.health_profile.core.ports.repository import (
    IUserRecordStore,
)
from health_assistant.domain.health_profile.core.value_objects.bfp_method import (
    BfpMethod,
)
from health_assistant.domain.health_profile.core.value_objects.body_fat import (
    BodyFatResult,
)
from health_assistant.domain.health_profile.core.value_objects.macro_split import (
    MacroSplit,
)
from health_assistant.infrastructure.record_source.codec import (
    format_record_line,
    parse_record_line,
)
from health_assistant.presentation.console import (
    render_roster,
    render_user_summary,
)

logger = structlog.get_logger(__name__)

ALL_USERS = "all"
NO_USER_IN_LIST = "no user in list"
USER_NOT_FOUND = "user not found"


class HealthAssistantService:
    """
    Computes metrics for users held in a roster.

    The body fat method is chosen per instance; several instances may
    share one store. Lookups of unknown names are reported in the log and
    return None instead of raising.

    Example:
        >>> store = InMemoryUserRecordStore()
        >>> assistant = HealthAssistantService(store, BfpMethod.BMI, InMemoryRecordStorage())
        >>> assistant.add_user(UserRecord.create("John", "male", 30, 70, 175, 80, 38, "active"))
        >>> assistant.compute_all("john").body_fat.category
        'Bmi: Normal'
    """

    def __init__(
        self,
        store: IUserRecordStore,
        method: BfpMethod,
        storage: IRecordStorage,
        orchestrator: Optional[MetricsOrchestrator] = None,
    ):
        self._store = store
        self._method = BfpMethod(method)
        self._storage = storage
        self._orchestrator = orchestrator or MetricsOrchestrator()

    @property
    def method(self) -> BfpMethod:
        return self._method

    @property
    def store(self) -> IUserRecordStore:
        return self._store

    def add_user(self, record: UserRecord) -> None:
        self._store.add(record)

    def compute_bfp(self, name: str) -> Optional[BodyFatResult]:
        """Body fat for a stored user, None if the user is absent."""
        record = self._store.find_by_name(name)
        if record is None:
            return None
        return self._orchestrator.body_fat(self._method, record)

    def compute_daily_calories(self, name: str) -> Optional[int]:
        record = self._store.find_by_name(name)
        if record is None:
            return None
        return self._orchestrator.daily_calories(record)

    def compute_meal_prep(self, name: str) -> Optional[MacroSplit]:
        record = self._store.find_by_name(name)
        if record is None:
            return None
        return self._orchestrator.meal_prep(record)

    def compute_all(self, name: str) -> Optional[MetricsCalculations]:
        """Body fat, calories and macros for a stored user."""
        record = self._store.find_by_name(name)
        if record is None:
            return None
        return self._orchestrator.enrich(self._method, record)

    def display(self, name: str) -> str:
        """
        Render one user, or the whole roster when name is "all".

        Returns:
            Rendered text, or a "no user in list" / "user not found" message
        """
        if name == ALL_USERS:
            return render_roster(self._store.list_all())

        if not self._store.list_all():
            return NO_USER_IN_LIST

        record = self._store.list_one(name)
        if record is None:
            return USER_NOT_FOUND
        return render_user_summary(record)

    def delete_user(self, name: str) -> bool:
        logger.info("Deleting user", name=name)
        return self._store.remove_by_name(name)

    def serialize(self, target: str) -> int:
        """
        Append the raw attributes of every stored record to a sink.

        Returns:
            Number of records written
        """
        lines: List[str] = [format_record_line(record) for record in self._store.list_all()]
        self._storage.append_lines(target, lines)
        return len(lines)

    def read_from_file(self, source: str) -> List[UserRecord]:
        """
        Parse a source into the roster without computing metrics.

        Raises:
            SourceMissingError, SourceEmptyError, MalformedRecordError
        """
        lines = self._storage.read_lines(source)
        records = [
            parse_record_line(line, line_number)
            for line_number, line in enumerate(lines, start=1)
        ]
        for record in records:
            self._store.add(record)
        logger.info("Records read", source=source, count=len(records))
        return records

    def mass_load_and_compute(self, source: str) -> List[UserRecord]:
        """Load a source with this instance's method and add it to the roster."""
        loader = BatchLoader(self._storage, self._orchestrator)
        return loader.load_into(self._store, source, self._method)
