from .assistant_service import HealthAssistantService
from .batch_loader import BatchLoader

__all__ = ["BatchLoader", "HealthAssistantService"]
