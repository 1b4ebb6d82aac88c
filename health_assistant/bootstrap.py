"""Startup wiring: environment, logging and default adapters."""

from pathlib import Path
from typing import Optional

import structlog

from health_assistant.application.health_profile.commands.assistant_service import (
    HealthAssistantService,
)
from health_assistant.application.health_profile.commands.batch_loader import (
    BatchLoader,
)
from health_assistant.application.health_profile.queries.population_stats import (
    PopulationStatsService,
)
from health_assistant.domain.health_profile.core.ports.record_source import (
    IRecordStorage,
)
from health_assistant.domain.health_profile.core.ports.repository import (
    IUserRecordStore,
)
from health_assistant.domain.health_profile.core.value_objects.bfp_method import (
    BfpMethod,
)
from health_assistant.infrastructure.config import (
    get_bmi_data_file,
    get_data_dir,
    get_us_navy_data_file,
    load_environment,
)
from health_assistant.infrastructure.logging_config import configure_logging
from health_assistant.infrastructure.persistence.factory import (
    create_user_record_store,
)
from health_assistant.infrastructure.record_source.csv_storage import (
    CsvFileRecordStorage,
)

logger = structlog.get_logger(__name__)


def bootstrap(env_path: Optional[Path] = None) -> None:
    """
    Load .env and configure logging.

    Call once at startup, before creating services.
    """
    env_loaded = load_environment(env_path)
    configure_logging()
    logger.info(
        "startup.config",
        env_loaded=env_loaded,
        data_dir=str(get_data_dir() or Path.cwd()),
        bmi_source=get_bmi_data_file(),
        us_navy_source=get_us_navy_data_file(),
    )


def create_assistant(
    method: BfpMethod,
    store: Optional[IUserRecordStore] = None,
    storage: Optional[IRecordStorage] = None,
) -> HealthAssistantService:
    """
    Create an assistant with the configured adapters.

    Pass the same store to several assistants to let them share a roster.
    """
    if store is None:
        store = create_user_record_store()
    if storage is None:
        storage = CsvFileRecordStorage()
    return HealthAssistantService(store=store, method=method, storage=storage)


def create_population_stats(
    storage: Optional[IRecordStorage] = None,
) -> PopulationStatsService:
    """Population queries over the configured BMI and US Navy sources."""
    if storage is None:
        storage = CsvFileRecordStorage()
    return PopulationStatsService(BatchLoader(storage))
