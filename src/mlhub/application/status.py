"""Normalises job status reported by the training platform."""
from typing import Iterable

DEFAULT_DONE_STATUSES = ("Completed", "Failed", "Terminated", "Abnormal")
TRAINING_STATUS_SCHEDULING = "scheduling"


class StatusReconciler:
    """Maps raw platform status strings onto the view shown to callers.

    The platform writes nothing until a job starts, so an empty status is
    presented as ``scheduling`` and never counts as done.
    """

    def __init__(self, done_statuses: Iterable[str] = DEFAULT_DONE_STATUSES,
                 scheduling_status: str = TRAINING_STATUS_SCHEDULING):
        self.done_statuses = frozenset(done_statuses)
        self.scheduling_status = scheduling_status

    def is_job_done(self, status: str) -> bool:
        if not status:
            return False
        return status in self.done_statuses

    def display_status(self, status: str) -> str:
        return status or self.scheduling_status
