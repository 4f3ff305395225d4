"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from rtzr_transcriber.routes import transcriptions_router

patch_all()

app = FastAPI(title="Recording Transcription API")
app.include_router(transcriptions_router)
