"""Transcript ingestion for batch extraction runs."""
from jobsheet.ingestion.loader import load_transcripts, parse_transcript

__all__ = [
    "load_transcripts",
    "parse_transcript",
]
