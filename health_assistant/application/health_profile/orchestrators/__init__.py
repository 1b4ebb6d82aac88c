from .metrics_orchestrator import MetricsCalculations, MetricsOrchestrator

__all__ = ["MetricsCalculations", "MetricsOrchestrator"]
