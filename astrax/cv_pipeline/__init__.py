"""Résumé upload pipeline: text extraction (PDF/DOCX/TXT), cleaning, LLM extraction."""

from astrax.cv_pipeline.cv_extractor import analyze_resume, fallback_profile, run_cv_pipeline
from astrax.cv_pipeline.text_extractor import clean_resume_text, extract_text_from_file

__all__ = ["analyze_resume", "fallback_profile", "run_cv_pipeline", "extract_text_from_file", "clean_resume_text"]
