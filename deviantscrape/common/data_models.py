"""Pydantic base model for typed records.

Every record kind a page produces has a model derived from ScrapedData.
Fields a page may leave out are Optional with a None default, mirroring the
plain-dict records where an absent field is an absent key.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from deviantscrape.common.deferred_validation import (
    DeferredValidation,
)

T = TypeVar("T", bound="ScrapedData")


class ScrapedData(BaseModel):
    """Base class for extracted records with deferred validation support.

    Example:
        # Validates immediately
        entry = JournalEntry(title="Hello", date="Jan 1", url="http://...")

        # Deferred validation
        deferred = JournalEntry.raw(title="Hello", date="Jan 1")
        entry = deferred.confirm()
    """

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def raw(
        cls: type[T], request_url: str = "", **data: Any
    ) -> DeferredValidation[T]:
        """Create a DeferredValidation wrapper with raw, unvalidated data.

        Args:
            request_url: Optional URL for error reporting.
            **data: Raw field values (not validated).
        """
        return DeferredValidation(cls, request_url, **data)

    def to_record(self) -> dict[str, Any]:
        """Dump back to a plain record, leaving out fields that were never set."""
        return self.model_dump(exclude_unset=True)
