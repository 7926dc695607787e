"""Entity package: Pay."""

from .entity import Pay
from .repository import PayRepository
from .table import PayTable

__all__ = ["Pay", "PayRepository", "PayTable"]
