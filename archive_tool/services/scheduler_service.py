"""Foreground scheduler that repeats the selected job every N seconds."""
from __future__ import annotations
from dataclasses import dataclass
import datetime
from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from archive_tool.config.settings import Settings
from archive_tool.services.job_service import JobService
from archive_tool.utils.constants import SCHEDULED_TRIGGER
from archive_tool.utils.logger import get_logger

log = get_logger(__name__)

@dataclass
class SchedulerService:
    """Builds and runs a single interval job.

    max_instances=1 keeps runs for this (series, directory) from overlapping.
    """
    settings: Settings
    _scheduler: BlockingScheduler | None = None

    def build(self) -> BlockingScheduler:
        """Create the scheduler with its job registered (not started)."""
        if self._scheduler:
            return self._scheduler

        s = self.settings
        scheduler = BlockingScheduler(timezone=s.local_timezone) if s.local_timezone else BlockingScheduler()
        scheduler.add_job(
            func=self._run_job_safely,
            trigger=IntervalTrigger(seconds=s.interval_seconds),
            id=f"{s.mode}_{s.name}",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            next_run_time=datetime.datetime.now(datetime.timezone.utc),
        )
        self._scheduler = scheduler
        return scheduler

    def start(self) -> None:
        """Run until interrupted."""
        scheduler = self.build()
        log.info("Scheduler started: %s %s every %s seconds", self.settings.mode, self.settings.name, self.settings.interval_seconds)
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            log.info("Scheduler stopped.")

    def _run_job_safely(self) -> None:
        """Run scheduled job; a failed run is logged and the next one still fires."""
        try:
            JobService(self.settings).run(trigger=SCHEDULED_TRIGGER)
        except Exception:
            log.exception("Scheduled %s job failed.", self.settings.mode)
