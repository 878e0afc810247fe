class EntityNotFoundError(Exception):
    entity = "Entity"

    def __init__(self, entity_id: int | str):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} with id {entity_id} not found")


class OrganizationNotFoundError(EntityNotFoundError):
    entity = "Organization"


class StatusPageNotFoundError(EntityNotFoundError):
    entity = "Status page"


class ComponentGroupNotFoundError(EntityNotFoundError):
    entity = "Component group"


class ComponentNotFoundError(EntityNotFoundError):
    entity = "Component"


class IncidentNotFoundError(EntityNotFoundError):
    entity = "Incident"
