"""Download job tracking: job lists, live polling and the actions that start jobs."""

import logging

from sec_dashboard.api.downloads import DownloadsApi
from sec_dashboard.models import DownloadJob, DownloadRequest, DownloadType
from sec_dashboard.resources.base import ActionState, Poller, Resource

logger = logging.getLogger(__name__)

ACTIVE_JOBS_POLL_S = 5.0
JOB_POLL_S = 2.0


class DownloadJobs(Resource[list[DownloadJob]]):
    def __init__(self, api: DownloadsApi, limit: int = 10):
        super().__init__(lambda: api.get_jobs(limit), default=[], fallback="Failed to load download jobs")
        self.limit = limit

    @property
    def jobs(self) -> list[DownloadJob]:
        return self.data


class _Polling:
    poller: Poller

    def start(self):
        """Load once now, then keep polling until ``stop``."""
        self.load()
        self.poller.start()
        return self

    def stop(self) -> None:
        self.poller.stop()

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


class ActiveDownloadJobs(_Polling, Resource[list[DownloadJob]]):
    """Jobs still pending or in progress, refreshed every ``interval`` seconds."""

    def __init__(self, api: DownloadsApi, interval: float = ACTIVE_JOBS_POLL_S):
        super().__init__(api.get_active_jobs, default=[], fallback="Failed to load active jobs")
        self.poller = Poller(interval, self.load)

    @property
    def jobs(self) -> list[DownloadJob]:
        return self.data


class DownloadJobWatcher(_Polling, Resource[DownloadJob]):
    """
    Follow a single job until it reaches a terminal status.

    Polling only continues while the last observed status is PENDING or
    IN_PROGRESS. Once the job completes, fails or is cancelled the poller
    stops and no further requests are made. Without a job id nothing is
    fetched.
    """

    def __init__(self, api: DownloadsApi, job_id: str | None, interval: float = JOB_POLL_S):
        fetch = (lambda: api.get_job_by_id(job_id)) if job_id else None
        super().__init__(fetch, fallback="Failed to load job")
        self.job_id = job_id
        self.poller = Poller(interval, self.load, while_=self._job_active)

    @property
    def job(self) -> DownloadJob | None:
        return self.data

    def start(self) -> "DownloadJobWatcher":
        if not self.enabled:
            self.load()
            return self
        return super().start()

    def _job_active(self) -> bool:
        job = self.data
        if job is None or not job.is_active:
            if job is not None:
                logger.info("Job %s finished with status %s", job.id, job.status.value)
            return False
        return True


class DownloadActions:
    """Start and cancel downloads. Failures are recorded in ``error`` and re-raised."""

    def __init__(self, api: DownloadsApi):
        self._api = api
        self._state: ActionState[DownloadJob | None] = ActionState()

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    def download_tickers(self, type: DownloadType = DownloadType.TICKERS_ALL) -> DownloadJob:
        return self._state.run(lambda: self._api.download_tickers(type), "Failed to start download")

    def download_submissions(self, cik: str, user_agent: str | None = None) -> DownloadJob:
        return self._state.run(lambda: self._api.download_submissions(cik, user_agent), "Failed to start download")

    def download_bulk(self, type: DownloadType, user_agent: str | None = None) -> DownloadJob:
        if type not in (DownloadType.BULK_SUBMISSIONS, DownloadType.BULK_COMPANY_FACTS):
            raise ValueError(f"Not a bulk download type: {type}")
        request = DownloadRequest(type=type, user_agent=user_agent)
        return self._state.run(lambda: self._api.download_bulk(request), "Failed to start bulk download")

    def cancel_job(self, job_id: str) -> None:
        self._state.run(lambda: self._api.cancel_job(job_id), "Failed to cancel job")
        logger.info("Cancelled job %s", job_id)


class Downloads:
    """The downloads page: recent jobs, live active jobs and the actions."""

    def __init__(self, api: DownloadsApi, limit: int = 50, interval: float = ACTIVE_JOBS_POLL_S):
        self.history = DownloadJobs(api, limit)
        self.active = ActiveDownloadJobs(api, interval)
        self.actions = DownloadActions(api)

    @property
    def jobs(self) -> list[DownloadJob]:
        return self.history.jobs

    @property
    def active_jobs(self) -> list[DownloadJob]:
        return self.active.jobs

    @property
    def loading(self) -> bool:
        return self.history.loading

    @property
    def error(self) -> str | None:
        return self.history.error

    def refresh(self) -> "Downloads":
        self.history.load()
        return self

    def start(self) -> "Downloads":
        self.history.load()
        self.active.start()
        return self

    def stop(self) -> None:
        self.active.stop()

    def download_tickers(self, type: DownloadType = DownloadType.TICKERS_ALL) -> DownloadJob:
        return self.actions.download_tickers(type)

    def download_submissions(self, cik: str, user_agent: str | None = None) -> DownloadJob:
        return self.actions.download_submissions(cik, user_agent)

    def download_bulk(self, type: DownloadType, user_agent: str | None = None) -> DownloadJob:
        return self.actions.download_bulk(type, user_agent)

    def cancel_job(self, job_id: str) -> None:
        self.actions.cancel_job(job_id)

    def __enter__(self) -> "Downloads":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
