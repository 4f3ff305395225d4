import pytest

from rtzr_transcriber.domain import Transcript, TranscriptMapper, Utterance
from rtzr_transcriber.exceptions import TranscriptValidationError, TransportError


def _entry(spk, start_at, duration, msg):
    return {
        "spk": spk,
        "start_at": start_at,
        "duration": duration,
        "msg": msg,
        "lang": "ko",
    }


def test_map_keeps_order_and_values():
    payload = {"utterances": [_entry("A", 0, 2, "hi"), _entry("B", 2, 2, "hello")]}

    transcript = TranscriptMapper().map(payload)

    assert transcript.utterances == (
        Utterance(speaker="A", start_ms=0, end_ms=2, text="hi"),
        Utterance(speaker="B", start_ms=2, end_ms=4, text="hello"),
    )


def test_map_stringifies_numeric_speakers():
    payload = {
        "utterances": [_entry(0, 0, 1200, "안녕하세요"), _entry(1, 1300, 800, "네")]
    }

    transcript = TranscriptMapper().map(payload)

    assert [u.speaker for u in transcript.utterances] == ["0", "1"]


def test_map_without_diarization_drops_speakers():
    payload = {"utterances": [_entry(0, 0, 10, "hi")]}

    transcript = TranscriptMapper().map(payload, diarization=False)

    assert transcript.utterances[0].speaker is None


def test_map_empty_utterance_list_is_empty_transcript():
    assert TranscriptMapper().map({"utterances": []}) == Transcript(utterances=())


@pytest.mark.parametrize(
    "entry",
    [
        _entry(0, -1, 10, "hi"),
        _entry(0, 0, -5, "hi"),
        _entry(0, "0", 10, "hi"),
        _entry(0, True, 10, "hi"),
        _entry(0, 0, 10, ""),
        _entry(0, 0, 10, "   "),
        {"spk": 0, "start_at": 0, "duration": 10},
        "not an object",
    ],
)
def test_map_rejects_malformed_entry(entry):
    payload = {"utterances": [_entry(0, 0, 10, "first"), entry]}

    with pytest.raises(TranscriptValidationError):
        TranscriptMapper().map(payload)


def test_map_rejects_decreasing_start_offsets():
    payload = {
        "utterances": [_entry(0, 500, 10, "later"), _entry(1, 100, 10, "earlier")]
    }

    with pytest.raises(TranscriptValidationError, match="before the previous"):
        TranscriptMapper().map(payload)


@pytest.mark.parametrize("payload", [{}, {"utterances": None}, {"utterances": "x"}])
def test_map_requires_utterance_list(payload):
    with pytest.raises(TranscriptValidationError):
        TranscriptMapper().map(payload)


def test_validation_error_is_transport_class():
    with pytest.raises(TransportError) as exc_info:
        TranscriptMapper().map({})

    assert exc_info.value.retryable is False


def test_transcript_to_text():
    transcript = Transcript(
        utterances=(
            Utterance(speaker="0", start_ms=0, end_ms=10, text="hi"),
            Utterance(speaker=None, start_ms=10, end_ms=20, text="hello"),
        )
    )

    assert transcript.to_text() == "Speaker 0: hi\nhello"
