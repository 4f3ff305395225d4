"""Custom exceptions for the transcription orchestrator."""


class OrchestrationError(Exception):
    """Base class for every failure surfaced by a transcription call."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class AuthFailedError(OrchestrationError):
    """Raised when the provider rejects or cannot process the credentials."""

    def __init__(self, detail: str, cause: Exception | None = None):
        self.detail = detail
        super().__init__(f"Authentication failed: {detail}", cause)


class InvalidRequestError(OrchestrationError):
    """Raised when a transcription request violates its input constraints."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid transcription request: {detail}")


class SubmitFailedError(OrchestrationError):
    """Raised when the provider does not accept a transcription job."""

    def __init__(self, detail: str, cause: Exception | None = None):
        self.detail = detail
        super().__init__(f"Job submission failed: {detail}", cause)


class PollTimeoutError(OrchestrationError):
    """Raised when a job is still running after the polling budget is spent."""

    def __init__(
        self,
        job_id: str,
        attempts: int,
        elapsed: float,
        cause: Exception | None = None,
    ):
        self.job_id = job_id
        self.attempts = attempts
        self.elapsed = elapsed
        super().__init__(
            f"Job '{job_id}' did not finish after {attempts} attempts"
            f" ({elapsed:.1f}s)",
            cause,
        )


class PollCancelledError(PollTimeoutError):
    """
    Raised when a transcription is aborted through the cancellation signal.

    ``stage`` names the step that was about to run. Before submission there
    is no job yet and ``job_id`` is None.
    """

    def __init__(
        self,
        job_id: str | None,
        attempts: int,
        elapsed: float,
        stage: str = "polling",
    ):
        super().__init__(job_id or "", attempts, elapsed)
        self.job_id = job_id
        self.stage = stage
        if job_id:
            message = (
                f"Polling of job '{job_id}' was cancelled"
                f" after {attempts} attempts"
            )
        else:
            message = f"Transcription was cancelled before {stage}"
        self.args = (message,)


class JobFailedError(OrchestrationError):
    """Raised when the provider reports a terminal failure for a job."""

    def __init__(self, job_id: str, reason: str):
        self.job_id = job_id
        self.reason = reason
        super().__init__(f"Job '{job_id}' failed: {reason}")


class TransportError(OrchestrationError):
    """Raised when a provider call fails below the application level."""

    def __init__(
        self, detail: str, cause: Exception | None = None, retryable: bool = True
    ):
        self.detail = detail
        self.retryable = retryable
        super().__init__(f"Transport error: {detail}", cause)


class TranscriptValidationError(TransportError):
    """Raised when a completed job payload cannot be turned into a transcript."""

    def __init__(self, detail: str):
        super().__init__(detail, retryable=False)
        self.args = (f"Invalid transcript payload: {detail}",)


class StorageDownloadError(Exception):
    """Raised when downloading a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to download '{object_name}' from storage")
