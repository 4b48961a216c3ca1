"""Tests for job status persistence."""

import pendulum

from bytesummary.db import JobStatusRepository, MemoryStore
from bytesummary.db.jobs import IDLE_MESSAGE
from bytesummary.models import JobStatus

START = pendulum.datetime(2024, 6, 1, 12, 0, 0, tz="UTC")


def make_status(run_id: str, started_at, status: str = "running") -> JobStatus:
    return JobStatus(run_id=run_id, status=status, message=f"run {run_id}", started_at=started_at)


class TestJobStatusRepository:
    def test_idle_when_absent(self, store) -> None:
        jobs = JobStatusRepository(store)

        assert jobs.get() is None
        idle = jobs.get_or_idle()
        assert idle.status == "idle"
        assert idle.message == IDLE_MESSAGE

    def test_save_sets_updated_at(self, store) -> None:
        jobs = JobStatusRepository(store)

        assert jobs.save(make_status("a", START))

        loaded = jobs.get()
        assert loaded.run_id == "a"
        assert loaded.updated_at is not None

    def test_same_run_overwrites(self, store) -> None:
        jobs = JobStatusRepository(store)
        status = make_status("a", START)
        jobs.save(status)

        status.status = "completed"
        assert jobs.save(status)

        assert jobs.get().status == "completed"

    def test_newer_run_overwrites_older(self, store) -> None:
        jobs = JobStatusRepository(store)
        jobs.save(make_status("a", START))

        assert jobs.save(make_status("b", START.add(minutes=5)))
        assert jobs.get().run_id == "b"

    def test_stale_run_is_ignored(self, store) -> None:
        jobs = JobStatusRepository(store)
        older = make_status("a", START)
        jobs.save(older)
        jobs.save(make_status("b", START.add(minutes=5)))

        older.status = "completed"
        assert not jobs.save(older)

        loaded = jobs.get()
        assert loaded.run_id == "b"
        assert loaded.status == "running"

    def test_expires(self, clock) -> None:
        jobs = JobStatusRepository(MemoryStore(clock=clock), ttl_hours=24)
        jobs.save(make_status("a", START))

        clock.advance(hours=24)

        assert jobs.get() is None

    def test_record_uses_camel_case(self, store) -> None:
        JobStatusRepository(store).save(make_status("a", START))

        record = store.get("job:status")

        assert record["runId"] == "a"
        assert record["totalArticles"] == 0
        assert "completedAt" not in record
