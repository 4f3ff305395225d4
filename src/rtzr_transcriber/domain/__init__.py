"""Domain layer exports."""

from .job_poller import JobPoller
from .models import (
    AccessToken,
    AudioPayload,
    Credentials,
    JobSnapshot,
    JobStatus,
    PollingPolicy,
    Transcript,
    TranscriptionConfig,
    TranscriptionModel,
    Utterance,
)
from .orchestrator import TranscriptionOrchestrator
from .transcript_mapper import TranscriptMapper

__all__ = [
    "AccessToken",
    "AudioPayload",
    "Credentials",
    "JobPoller",
    "JobSnapshot",
    "JobStatus",
    "PollingPolicy",
    "Transcript",
    "TranscriptMapper",
    "TranscriptionConfig",
    "TranscriptionModel",
    "TranscriptionOrchestrator",
    "Utterance",
]
