"""Batch processing of transcript directories."""
from jobsheet.processing.pipeline import run_pipeline

__all__ = ["run_pipeline"]
