class ComponentsNotFoundError(Exception):
    def __init__(self, status_page_id: int, component_ids: list[int]):
        self.status_page_id = status_page_id
        self.component_ids = component_ids

        ids = ", ".join(str(component_id) for component_id in component_ids)
        super().__init__(
            f"Components with ids {ids} not found or don't belong to status page {status_page_id}"
        )
