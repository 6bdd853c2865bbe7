"""타임 엔트리 레포지토리.

Time Entry Repository — ordered by work date, most recent first.
"""

from lexiflow.models.billing import TimeEntry
from lexiflow.repositories.base import BaseRepository


class TimeEntryRepository(BaseRepository[TimeEntry]):
    def __init__(self) -> None:
        super().__init__(TimeEntry, default_order=TimeEntry.entry_date.desc())


time_entry_repository: TimeEntryRepository = TimeEntryRepository()
