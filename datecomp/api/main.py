from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from datecomp.config import load_settings
from datecomp.core.keywords import classify
from datecomp.core.parser import parse_date
from datecomp.core.record import DateRecord

# -------------------------
# FastAPI setup
# -------------------------
SETTINGS = load_settings()
app = FastAPI(title="datecomp API", version="0.1.0")
LOGGER = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------
# Pydantic response models
# -------------------------
class ParseOut(BaseModel):
    text: str
    ok: bool
    record: Optional[DateRecord] = None


class KeywordOut(BaseModel):
    word: str
    type: str
    value: int


# -------------------------
# Routes
# -------------------------
@app.get("/", tags=["meta"])
async def root():
    return {"message": "datecomp API is running"}


@app.get("/healthz", tags=["meta"])
async def healthz():
    return {"status": "ok"}


@app.get("/parse", response_model=ParseOut, tags=["data"])
async def parse(text: str = Query(..., min_length=1, description="Date string to parse")):
    record = parse_date(text)
    if record is None:
        LOGGER.debug("parse endpoint rejected text=%r", text)
    return ParseOut(text=text, ok=record is not None, record=record)


@app.get("/keywords/{word}", response_model=KeywordOut, tags=["data"])
async def keyword(word: str):
    entry = classify(word)
    return KeywordOut(word=word, type=entry.type.value, value=entry.value)
