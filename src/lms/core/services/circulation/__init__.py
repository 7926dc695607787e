from .circulation_service import CirculationService

__all__ = ["CirculationService"]
