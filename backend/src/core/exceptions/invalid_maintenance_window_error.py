from datetime import datetime


class InvalidMaintenanceWindowError(Exception):
    def __init__(self, scheduled_start: datetime, scheduled_end: datetime):
        self.scheduled_start = scheduled_start
        self.scheduled_end = scheduled_end
        super().__init__("Scheduled end time must be after scheduled start time")
