"""Maps completed job payloads to transcripts."""

from typing import Any

from rtzr_transcriber.exceptions import TranscriptValidationError

from .models import Transcript, Utterance


class TranscriptMapper:
    """Builds validated transcripts from the provider's result payload."""

    def map(self, payload: dict[str, Any], diarization: bool = True) -> Transcript:
        """
        Converts a completed job's ``results`` document to a Transcript.

        Args:
            payload: The ``results`` object of a completed job.
            diarization: Whether speaker labels were requested. When off,
                utterances carry no speaker.

        Returns:
            Transcript with utterances in provider order.

        Raises:
            TranscriptValidationError: If the payload or any entry is malformed.
        """
        raw_utterances = (
            payload.get("utterances") if isinstance(payload, dict) else None
        )
        if not isinstance(raw_utterances, list):
            raise TranscriptValidationError("payload has no utterance list")

        utterances: list[Utterance] = []
        for index, entry in enumerate(raw_utterances):
            utterance = self._map_entry(index, entry, diarization)
            if utterances and utterance.start_ms < utterances[-1].start_ms:
                raise TranscriptValidationError(
                    f"utterance {index} starts at {utterance.start_ms}ms, "
                    f"before the previous one at {utterances[-1].start_ms}ms"
                )
            utterances.append(utterance)

        return Transcript(utterances=tuple(utterances))

    def _map_entry(self, index: int, entry: Any, diarization: bool) -> Utterance:
        if not isinstance(entry, dict):
            raise TranscriptValidationError(f"utterance {index} is not an object")

        start_at = entry.get("start_at")
        duration = entry.get("duration")
        text = entry.get("msg")

        if not _is_offset(start_at) or not _is_offset(duration):
            raise TranscriptValidationError(
                f"utterance {index} has invalid offsets "
                f"(start_at={start_at!r}, duration={duration!r})"
            )
        if not isinstance(text, str) or not text.strip():
            raise TranscriptValidationError(f"utterance {index} has no text")

        speaker = entry.get("spk")
        return Utterance(
            speaker=str(speaker) if diarization and speaker is not None else None,
            start_ms=start_at,
            end_ms=start_at + duration,
            text=text,
        )


def _is_offset(value: Any) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
