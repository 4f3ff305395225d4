from pydantic import BaseModel

from rtzr_transcriber.domain import Utterance


class TranscriptionResponse(BaseModel):
    """Transcript of a stored recording."""

    recording_id: str
    message: str
    transcription: list[Utterance]
    text: str
