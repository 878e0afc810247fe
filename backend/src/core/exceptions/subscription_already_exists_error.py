class SubscriptionAlreadyExistsError(Exception):
    def __init__(self, email: str, status_page_id: int):
        self.email = email
        self.status_page_id = status_page_id
        super().__init__(f"Subscription already exists for '{email}' on status page {status_page_id}")
