"""观测记录模型与仓库"""

from .observation_model import Feature, Observation, Project
from .repository import InMemoryObservationRepository, ObservationRepository

__all__ = [
    "Feature",
    "InMemoryObservationRepository",
    "Observation",
    "ObservationRepository",
    "Project",
]
