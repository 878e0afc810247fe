class ComponentGroupMismatchError(Exception):
    def __init__(self, component_group_id: int, status_page_id: int):
        self.component_group_id = component_group_id
        self.status_page_id = status_page_id
        super().__init__(
            f"Component group {component_group_id} does not belong to status page {status_page_id}"
        )
