"""Download job endpoints."""

from sec_dashboard.api.base import Endpoint, query, segment
from sec_dashboard.models import DownloadJob, DownloadRequest, DownloadType


class DownloadsApi(Endpoint):
    """Start, list and cancel server-side download jobs."""

    resource = "downloads"

    def download_tickers(self, type: DownloadType = DownloadType.TICKERS_ALL) -> DownloadJob:
        """
        Start downloading a company ticker list.

        Args:
            type: Which list to fetch (all, NYSE, NASDAQ or mutual funds)

        Returns:
            The new job, usually PENDING

        Raises:
            ApiError: If the backend refuses to start the job
        """
        data = self._client.post(self._path("tickers"), params=query(type=type))
        return self._one(DownloadJob, data)

    def download_submissions(self, cik: str, user_agent: str | None = None) -> DownloadJob:
        """
        Start downloading one company's submissions.

        Args:
            cik: Company CIK
            user_agent: User agent the backend sends to the SEC; the server
                        default is used when omitted

        Returns:
            The new job

        Raises:
            ValueError: If cik is empty
            ApiError: If the backend refuses to start the job
        """
        if not cik or not cik.strip():
            raise ValueError("CIK cannot be empty")
        request = DownloadRequest(type=DownloadType.SUBMISSIONS, cik=cik.strip(), user_agent=user_agent)
        return self._one(DownloadJob, self._client.post(self._path("submissions"), json=request.to_wire()))

    def download_bulk(self, request: DownloadRequest) -> DownloadJob:
        return self._one(DownloadJob, self._client.post(self._path("bulk"), json=request.to_wire()))

    def get_jobs(self, limit: int = 10) -> list[DownloadJob]:
        return self._many(DownloadJob, self._client.get(self._path("jobs"), params=query(limit=limit)))

    def get_active_jobs(self) -> list[DownloadJob]:
        return self._many(DownloadJob, self._client.get(self._path("jobs", "active")))

    def get_job_by_id(self, job_id: str) -> DownloadJob:
        """
        Get the current state of one job.

        Raises:
            ValueError: If job_id is empty
            ApiError: If the job does not exist or the call fails
        """
        return self._one(DownloadJob, self._client.get(self._path("jobs", segment(job_id, "Job id"))))

    def cancel_job(self, job_id: str) -> None:
        """
        Cancel a pending or running job.

        Raises:
            ValueError: If job_id is empty
            ApiError: If the job cannot be cancelled
        """
        self._client.delete(self._path("jobs", segment(job_id, "Job id")))
