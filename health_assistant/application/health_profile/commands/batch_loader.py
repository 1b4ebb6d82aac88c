"""BatchLoader - parse a record source and compute every record."""

from typing import List, Optional

import structlog

from health_assistant.application.health_profile.orchestrators.metrics_orchestrator import (
    MetricsOrchestrator,
)
from health_assistant.domain.health_profile.core.entities.user_record import UserRecord
from health_assistant.domain.health_profile.core.ports.record_source import (
    IRecordSource,
)
from health_assistant.domain.health_profile.core.ports.repository import (
    IUserRecordStore,
)
from health_assistant.domain.health_profile.core.value_objects.bfp_method import (
    BfpMethod,
)
from health_assistant.infrastructure.record_source.codec import parse_record_line

logger = structlog.get_logger(__name__)


class BatchLoader:
    """
    Loads records from a source and enriches each one.

    Strict: a missing or empty source, or any malformed line, aborts the
    whole load and nothing is returned or stored.
    """

    def __init__(
        self,
        source: IRecordSource,
        orchestrator: Optional[MetricsOrchestrator] = None,
    ):
        self._source = source
        self._orchestrator = orchestrator or MetricsOrchestrator()

    def load(self, source_name: str, method: BfpMethod) -> List[UserRecord]:
        """
        Build a transient roster from a source.

        Args:
            source_name: Source to read
            method: Body fat method applied to every record

        Returns:
            Enriched records in source order

        Raises:
            SourceMissingError: If the source cannot be opened
            SourceEmptyError: If the source is empty
            MalformedRecordError: If any line cannot be parsed
        """
        lines = self._source.read_lines(source_name)

        records: List[UserRecord] = []
        for line_number, line in enumerate(lines, start=1):
            record = parse_record_line(line, line_number)
            self._orchestrator.enrich(method, record)
            records.append(record)

        logger.info(
            "Records loaded and computed",
            source=source_name,
            method=method.value,
            count=len(records),
        )
        return records

    def load_into(
        self,
        store: IUserRecordStore,
        source_name: str,
        method: BfpMethod,
    ) -> List[UserRecord]:
        """
        Load a source and append every record to a store.

        Records are added only after the whole source parsed cleanly.

        Returns:
            The records added
        """
        records = self.load(source_name, method)
        for record in records:
            store.add(record)
        return records
