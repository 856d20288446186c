"""Schemas for slip printing API."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from slipprint.layout import SlipRow
from slipprint.printing import Backend


class PrintRequest(BaseModel):
    """Schema for a print request: ``[sequence number, title, quantity]`` rows."""

    data: list[tuple[int, str, int]] = Field(
        ..., min_length=1, description="Rows as [sn, title, qty] triples"
    )

    @field_validator("data")
    @classmethod
    def sequence_numbers_positive(cls, rows: list[tuple[int, str, int]]):
        for sn, _title, _qty in rows:
            if sn < 1:
                raise ValueError(f"Sequence number must be >= 1, got {sn}")
        return rows

    def rows(self) -> list[SlipRow]:
        """Convert the payload into slip rows."""
        return [SlipRow.from_values(values) for values in self.data]


class PrintResponse(BaseModel):
    """Schema for a completed print request."""

    success: bool = True
    job_id: str
    message: str
    backend: Backend
    fallback_reason: str | None = Field(
        None, description="Why auto mode printed to the mock backend instead"
    )


class PreviewResponse(BaseModel):
    """Schema for a rendered slip that was not printed."""

    success: bool = True
    lines: list[str]
    text: str


class PrintersResponse(BaseModel):
    """Schema for the printer listing."""

    success: bool = True
    printers: list[str]
    count: int


class HealthResponse(BaseModel):
    """Schema for the health check."""

    success: bool = True
    message: str
    timestamp: datetime
    version: str


class ErrorResponse(BaseModel):
    """Schema for a failed request."""

    success: bool = False
    error: str
