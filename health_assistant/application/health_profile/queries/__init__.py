from .population_stats import PopulationReport, PopulationStatsService

__all__ = ["PopulationReport", "PopulationStatsService"]
