"""Abstract audit sink for user activities."""
from abc import ABC, abstractmethod

from mlhub.domain.entities.activity import UserActivity


class ActivityRepository(ABC):

    @abstractmethod
    def save(self, activity: UserActivity) -> None:
        """Append an activity. Callers treat failures as non-fatal."""
        pass
