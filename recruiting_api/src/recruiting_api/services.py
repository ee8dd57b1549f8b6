# src/recruiting_api/services.py

from typing import Any, Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler


class PeriodicService:
    """
    Background service that runs `job` every `interval_minutes` on an
    APScheduler BackgroundScheduler, started by initialize() and stopped by
    shutdown(). The job body is injected; matching and screening logic live
    with their own collaborators.
    """

    name = "Periodic service"
    job_id = "periodic-service"

    def __init__(
            self,
            interval_minutes: int,
            job: Optional[Callable[[], Any]] = None,
            scheduler: Optional[BackgroundScheduler] = None,
    ):
        self.interval_minutes = interval_minutes
        self._job_func = job
        self._scheduler = scheduler
        self._owns_scheduler = scheduler is None
        self._job = None

    @property
    def is_running(self) -> bool:
        return self._job is not None

    def initialize(self) -> bool:
        """Schedules the job. Returns False when it was already scheduled."""
        if self._job is not None:
            return False
        if self._scheduler is None:
            self._scheduler = BackgroundScheduler()
        if not self._scheduler.running:
            self._scheduler.start()
        self._job = self._scheduler.add_job(
            self.run_once,
            "interval",
            minutes=self.interval_minutes,
            id=self.job_id,
            replace_existing=True,
        )
        print(f"SERVICES: {self.name} scheduled every {self.interval_minutes} minute(s).")
        return True

    def run_once(self) -> Any:
        if self._job_func is None:
            print(f"SERVICES: {self.name} tick (no job configured).")
            return None
        return self._job_func()

    def shutdown(self) -> None:
        if self._job is not None:
            self._job.remove()
            self._job = None
        if self._owns_scheduler and self._scheduler is not None and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        print(f"SERVICES: {self.name} stopped.")


class JobMatchingScheduler(PeriodicService):
    name = "Job matching scheduler"
    job_id = "job-matching"


class AutoScreeningService(PeriodicService):
    name = "Auto-screening service"
    job_id = "auto-screening"
