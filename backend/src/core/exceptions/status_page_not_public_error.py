class StatusPageNotPublicError(Exception):
    def __init__(self, status_page_id: int):
        self.status_page_id = status_page_id
        super().__init__(f"Status page {status_page_id} does not allow public subscriptions")
