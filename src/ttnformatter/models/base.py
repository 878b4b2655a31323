"""Base record class shared by all ttnformatter models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseRecord(BaseModel):
    """Base class for the formatter's input and output records.

    Records are created fresh for each decode/encode call and never mutated,
    so they are frozen. Unknown keys are ignored because the network host
    adds metadata (device id, timestamps, ...) that the codec does not use.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        # Host-facing names (fPort, bytes) are aliases of pythonic field names
        populate_by_name=True,
    )

    def to_output(self) -> dict[str, Any]:
        """Serialize to the plain dict shape the network host expects."""
        return self.model_dump(by_alias=True, mode="json")
