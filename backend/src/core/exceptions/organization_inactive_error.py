class OrganizationInactiveError(Exception):
    def __init__(self, organization_id: int):
        self.organization_id = organization_id
        super().__init__(f"Organization with id {organization_id} is not active")
