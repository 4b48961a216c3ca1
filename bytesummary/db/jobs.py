"""Job status persistence."""

from typing import Optional

import pendulum
from rich.console import Console

from ..config.constants import JOB_STATUS_KEY
from ..models import JobStatus
from .store import KeyValueStore

console = Console()

IDLE_MESSAGE = "No job has been run yet"


class JobStatusRepository:
    """Read and write the single process-wide job status record."""

    def __init__(self, store: KeyValueStore, ttl_hours: int = 24) -> None:
        self.store = store
        self.ttl = ttl_hours * 60 * 60

    def get(self) -> Optional[JobStatus]:
        """Get the stored status, or None if no run is recorded."""
        data = self.store.get(JOB_STATUS_KEY)
        if data is None:
            return None
        return JobStatus.model_validate(data)

    def get_or_idle(self) -> JobStatus:
        """Get the stored status or an idle placeholder."""
        return self.get() or JobStatus(status="idle", message=IDLE_MESSAGE)

    def save(self, status: JobStatus) -> bool:
        """
        Overwrite the status record.

        Writes are last-write-wins, except that a run never overwrites a
        record written by a run that started after it.

        Returns:
            True if the record was written
        """
        current = self.get()
        if (
            current is not None
            and status.run_id is not None
            and current.run_id not in (None, status.run_id)
            and current.started_at is not None
            and status.started_at is not None
            and current.started_at > status.started_at
        ):
            console.print(
                f"[yellow]Ignoring status update from stale run {status.run_id} "
                f"(current run {current.run_id})[/yellow]"
            )
            return False

        status.updated_at = pendulum.now("UTC")
        self.store.put(JOB_STATUS_KEY, status.to_record(), ttl=self.ttl)
        return True
