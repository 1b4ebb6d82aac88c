"""PopulationStatsService - healthy/unfit filters and summary percentages."""

from typing import List, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field

from health_assistant.application.health_profile.commands.batch_loader import (
    BatchLoader,
)
from health_assistant.domain.health_profile.core.entities.user_record import UserRecord
from health_assistant.domain.health_profile.core.exceptions.domain_errors import (
    EmptyPopulationError,
)
from health_assistant.domain.health_profile.core.value_objects.bfp_method import (
    BfpMethod,
)
from health_assistant.domain.health_profile.core.value_objects.gender import Gender
from health_assistant.infrastructure.config import (
    get_bmi_data_file,
    get_us_navy_data_file,
)

logger = structlog.get_logger(__name__)

ALL_METHODS = "all"

MethodSelector = Optional[Union[BfpMethod, str]]


def _percent(count: int, total: int) -> int:
    """Integer-truncated percentage."""
    return count * 100 // total


class PopulationReport(BaseModel):
    """
    Summary statistics over the BMI and US Navy populations.

    Gender shares are taken over all users. Healthy shares, including the
    per-gender ones, are taken over the size of the respective source.

    Example:
        >>> report = PopulationStatsService(loader).full_stats()
        >>> report.render()[0]
        'total users: 5'
    """

    model_config = ConfigDict(frozen=True)

    total_users: int = Field(..., ge=0)
    male_percent: int
    female_percent: int
    bmi_users: int = Field(..., ge=0)
    healthy_bmi_percent: int
    healthy_bmi_male_percent: int
    healthy_bmi_female_percent: int
    us_navy_users: int = Field(..., ge=0)
    healthy_us_navy_percent: int
    healthy_us_navy_male_percent: int
    healthy_us_navy_female_percent: int

    def render(self) -> List[str]:
        """Report lines for console output."""
        return [
            f"total users: {self.total_users}",
            f"male/female percentage: {self.male_percent}% / {self.female_percent}%",
            f"healthy bmi: {self.healthy_bmi_percent}%",
            f"healthy bmi male/female: {self.healthy_bmi_male_percent}% / "
            f"{self.healthy_bmi_female_percent}%",
            f"healthy us: {self.healthy_us_navy_percent}%",
            f"healthy us male/female: {self.healthy_us_navy_male_percent}% / "
            f"{self.healthy_us_navy_female_percent}%",
        ]


class PopulationStatsService:
    """
    Aggregate queries over the two record sources.

    The BMI source is evaluated with the BMI method and the US Navy source
    with the US Navy method. Every query reloads and recomputes its
    sources; nothing is cached between calls.
    """

    def __init__(
        self,
        loader: BatchLoader,
        bmi_source: Optional[str] = None,
        us_navy_source: Optional[str] = None,
    ):
        self._loader = loader
        self._bmi_source = bmi_source or get_bmi_data_file()
        self._us_navy_source = us_navy_source or get_us_navy_data_file()

    def source_for(self, method: BfpMethod) -> str:
        if method is BfpMethod.BMI:
            return self._bmi_source
        return self._us_navy_source

    def _methods(self, selector: MethodSelector) -> Tuple[BfpMethod, ...]:
        if selector is None or selector == ALL_METHODS:
            return (BfpMethod.BMI, BfpMethod.US_NAVY)

        method = BfpMethod.parse(selector)
        if method is None:
            logger.warning("Unsupported body fat method", method=selector)
            return ()
        return (method,)

    def _load(self, method: BfpMethod) -> List[UserRecord]:
        return self._loader.load(self.source_for(method), method)

    def _select(
        self,
        selector: MethodSelector,
        gender: Optional[str],
        healthy: bool,
    ) -> List[str]:
        names: List[str] = []
        for method in self._methods(selector):
            for record in self._load(method):
                if gender is not None and record.gender != gender:
                    continue
                is_normal = record.body_fat_category == method.normal_label
                if is_normal == healthy:
                    names.append(record.name)
        return names

    def healthy_users(
        self,
        method: MethodSelector = None,
        gender: Optional[str] = None,
    ) -> List[str]:
        """
        Names of users in the "Normal" category.

        Args:
            method: "bmi", "USArmy", or None/"all" for both sources
            gender: Optional gender filter ("male" / "female")

        Returns:
            Names in source order, BMI source first
        """
        names = self._select(method, gender, healthy=True)
        logger.info("Healthy users", method=method or ALL_METHODS, gender=gender, names=names)
        return names

    def unfit_users(
        self,
        method: MethodSelector = None,
        gender: Optional[str] = None,
    ) -> List[str]:
        """
        Names of users outside the "Normal" category.

        Users whose category could not be determined count as unfit.
        """
        names = self._select(method, gender, healthy=False)
        logger.info("Unfit users", method=method or ALL_METHODS, gender=gender, names=names)
        return names

    def full_stats(self) -> PopulationReport:
        """
        Compute the population summary from both sources.

        Raises:
            SourceMissingError, SourceEmptyError, MalformedRecordError:
                propagated from loading
            EmptyPopulationError: If a source yields no records
        """
        bmi_records = self._load(BfpMethod.BMI)
        us_navy_records = self._load(BfpMethod.US_NAVY)

        if not bmi_records:
            raise EmptyPopulationError(self._bmi_source)
        if not us_navy_records:
            raise EmptyPopulationError(self._us_navy_source)

        everyone = bmi_records + us_navy_records
        total = len(everyone)
        males = sum(1 for r in everyone if r.gender == Gender.MALE.value)
        females = sum(1 for r in everyone if r.gender == Gender.FEMALE.value)

        bmi_healthy = _healthy_counts(bmi_records, BfpMethod.BMI)
        us_healthy = _healthy_counts(us_navy_records, BfpMethod.US_NAVY)
        bmi_size = len(bmi_records)
        us_size = len(us_navy_records)

        report = PopulationReport(
            total_users=total,
            male_percent=_percent(males, total),
            female_percent=_percent(females, total),
            bmi_users=bmi_size,
            healthy_bmi_percent=_percent(bmi_healthy[0], bmi_size),
            healthy_bmi_male_percent=_percent(bmi_healthy[1], bmi_size),
            healthy_bmi_female_percent=_percent(bmi_healthy[2], bmi_size),
            us_navy_users=us_size,
            healthy_us_navy_percent=_percent(us_healthy[0], us_size),
            healthy_us_navy_male_percent=_percent(us_healthy[1], us_size),
            healthy_us_navy_female_percent=_percent(us_healthy[2], us_size),
        )
        logger.info("Population statistics computed", **report.model_dump())
        return report


def _healthy_counts(records: List[UserRecord], method: BfpMethod) -> Tuple[int, int, int]:
    """(all, male, female) counts of records in the normal category."""
    healthy = [r for r in records if r.body_fat_category == method.normal_label]
    males = sum(1 for r in healthy if r.gender == Gender.MALE.value)
    females = sum(1 for r in healthy if r.gender == Gender.FEMALE.value)
    return len(healthy), males, females
