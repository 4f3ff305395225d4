from .recording_handler import RecordingTranscriptionHandler

__all__ = ["RecordingTranscriptionHandler"]
