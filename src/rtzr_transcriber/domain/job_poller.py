"""Bounded polling of transcription job status."""

import threading
import time
from collections.abc import Callable
from typing import Any

from rtzr_transcriber.exceptions import (
    JobFailedError,
    PollCancelledError,
    PollTimeoutError,
    TranscriptValidationError,
    TransportError,
)
from rtzr_transcriber.infrastructure.interfaces.transcription_job_client import (
    TranscriptionJobClient,
)
from rtzr_transcriber.logging import setup_logging

from .models import AccessToken, JobSnapshot, JobStatus, PollingPolicy

logger = setup_logging()


class JobPoller:
    """Polls a job until it reaches a terminal state or the policy runs out."""

    def __init__(
        self,
        job_client: TranscriptionJobClient,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._job_client = job_client
        self._clock = clock

    def poll_until_done(
        self,
        token: AccessToken,
        job_id: str,
        policy: PollingPolicy,
        cancel_event: threading.Event | None = None,
    ) -> dict[str, Any]:
        """
        Waits for a job to complete and returns its result payload.

        Each attempt reads the status once. In-progress and unrecognised
        statuses, and retryable transport failures, are followed by a wait
        that grows with the policy's multiplier. A wait never outlasts the
        remaining time budget and ends early when ``cancel_event`` is set.

        Args:
            token: Bearer token for the status endpoint.
            job_id: The provider job id returned on submission.
            policy: Attempt, delay and deadline bounds.
            cancel_event: Optional signal that aborts polling when set.

        Returns:
            The ``results`` object of the completed job.

        Raises:
            JobFailedError: If the provider reports the job as failed.
            PollTimeoutError: If the attempt or time budget is exhausted.
            PollCancelledError: If ``cancel_event`` is set.
            TransportError: If a status read fails in a non-retryable way.
            TranscriptValidationError: If a completed job carries no results.
        """
        cancel_event = cancel_event or threading.Event()
        started = self._clock()
        delay = policy.initial_delay
        last_error: TransportError | None = None
        attempt = 0

        while attempt < policy.max_attempts:
            if cancel_event.is_set():
                raise PollCancelledError(job_id, attempt, self._clock() - started)

            attempt += 1
            try:
                snapshot = self._job_client.fetch_status(token, job_id)
            except TransportError as e:
                if not e.retryable:
                    raise
                last_error = e
                logger.warning(
                    "Job status check failed, will retry",
                    extra={"job_id": job_id, "attempt": attempt, "error": e.detail},
                )
            else:
                last_error = None
                status = JobStatus.parse(snapshot.status)
                if status is JobStatus.COMPLETED:
                    return self._completed_results(snapshot, attempt)
                if status is JobStatus.FAILED:
                    logger.error(
                        "Transcription job failed",
                        extra={"job_id": job_id, "reason": snapshot.failure_reason},
                    )
                    raise JobFailedError(job_id, snapshot.failure_reason)
                if status is None:
                    logger.warning(
                        "Unrecognised job status, treating as in progress",
                        extra={"job_id": job_id, "status": snapshot.status},
                    )
                else:
                    logger.info(
                        "Transcription in progress",
                        extra={
                            "job_id": job_id,
                            "status": status.value,
                            "attempt": attempt,
                        },
                    )

            if attempt >= policy.max_attempts:
                break

            remaining = policy.max_elapsed - (self._clock() - started)
            if remaining <= 0:
                break

            if cancel_event.wait(min(delay, policy.max_delay, remaining)):
                raise PollCancelledError(job_id, attempt, self._clock() - started)
            delay = policy.next_delay(delay)

        elapsed = self._clock() - started
        logger.error(
            "Polling budget exhausted",
            extra={
                "job_id": job_id,
                "attempts": attempt,
                "elapsed": round(elapsed, 3),
            },
        )
        raise PollTimeoutError(job_id, attempt, elapsed, cause=last_error)

    def _completed_results(
        self, snapshot: JobSnapshot, attempt: int
    ) -> dict[str, Any]:
        if snapshot.results is None:
            raise TranscriptValidationError(
                f"job '{snapshot.id}' completed without results"
            )
        if not isinstance(snapshot.results, dict):
            raise TranscriptValidationError(
                f"job '{snapshot.id}' completed with non-object results"
            )
        logger.info(
            "Transcription completed",
            extra={"job_id": snapshot.id, "attempts": attempt},
        )
        return snapshot.results
