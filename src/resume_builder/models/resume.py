"""Pydantic model for the resume generation result."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator


class ResumeResult(BaseModel):
    data: dict[str, Any] | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _data_xor_error(self) -> ResumeResult:
        if self.data is not None and self.error is not None:
            raise ValueError("ResumeResult cannot carry both data and error")
        if self.data is None and self.error is None:
            raise ValueError("ResumeResult needs either data or error")
        return self

    @classmethod
    def success(cls, data: dict[str, Any]) -> ResumeResult:
        return cls(data=data)

    @classmethod
    def failure(cls, error: str) -> ResumeResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
