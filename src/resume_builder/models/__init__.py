"""Data models for the resume builder."""

from resume_builder.models.resume import ResumeResult

__all__ = [
    "ResumeResult",
]
