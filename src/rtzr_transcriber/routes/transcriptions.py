"""Recording transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from rtzr_transcriber.dependencies import get_handler
from rtzr_transcriber.exceptions import (
    AuthFailedError,
    InvalidRequestError,
    JobFailedError,
    OrchestrationError,
    PollTimeoutError,
    StorageDownloadError,
    SubmitFailedError,
)
from rtzr_transcriber.handlers import RecordingTranscriptionHandler
from rtzr_transcriber.logging import setup_logging
from rtzr_transcriber.response_models import TranscriptionResponse

logger = setup_logging()

router = APIRouter(prefix="/recordings", tags=["transcription"])

HandlerDep = Annotated[RecordingTranscriptionHandler, Depends(get_handler)]


@router.post("/{recording_id}/transcription", response_model=TranscriptionResponse)
def transcribe_recording(
    recording_id: str, handler: HandlerDep
) -> TranscriptionResponse:
    """Transcribes a stored recording and returns its utterances."""
    try:
        transcript = handler.process(recording_id)
    except StorageDownloadError:
        raise HTTPException(status_code=404, detail="Recording not found")
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=e.detail)
    except AuthFailedError:
        raise HTTPException(
            status_code=502, detail="Speech provider authentication failed"
        )
    except SubmitFailedError:
        raise HTTPException(
            status_code=502, detail="Speech provider rejected the recording"
        )
    except JobFailedError as e:
        raise HTTPException(status_code=422, detail=f"Transcription failed: {e.reason}")
    except PollTimeoutError:
        raise HTTPException(
            status_code=504, detail="Transcription did not finish in time"
        )
    except OrchestrationError as e:
        logger.error(
            "Transcription error", extra={"recording_id": recording_id, "error": str(e)}
        )
        raise HTTPException(status_code=502, detail="Speech provider error")

    return TranscriptionResponse(
        recording_id=recording_id,
        message="Transcription completed",
        transcription=list(transcript.utterances),
        text=transcript.to_text(),
    )
