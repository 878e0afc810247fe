from abc import ABC, abstractmethod

from core.domain.incident_update import IncidentUpdate


class IncidentUpdateRepository(ABC):
    @abstractmethod
    async def add(self, incident_update: IncidentUpdate) -> IncidentUpdate:
        raise NotImplementedError

    @abstractmethod
    async def find_all_by_incident_id(self, incident_id: int) -> list[IncidentUpdate]:
        raise NotImplementedError
