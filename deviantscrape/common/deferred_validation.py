"""Deferred validation for extracted records.

Extraction works on plain dicts. DeferredValidation pairs one such record
with the Pydantic model describing it and validates only when confirm() is
called, so a caller can inspect or print a record that would not validate.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from deviantscrape.common.exceptions import (
    DataFormatAssumptionException,
)

T = TypeVar("T", bound=BaseModel)


class DeferredValidation(Generic[T]):
    """An unvalidated record bound to its model.

    Example:
        deferred = JournalEntry.raw(request_url=url, **record)
        entry = deferred.confirm()  # Raises if invalid
    """

    def __init__(
        self,
        model_class: type[T],
        request_url: str = "",
        **record: Any,
    ) -> None:
        """Bind a record to a model without validating it.

        Args:
            model_class: The Pydantic model class to validate against.
            request_url: URL of the page the record came from.
            **record: Field values as extracted.
        """
        self._model_class = model_class
        self._request_url = request_url
        self._record = record

    def confirm(self) -> T:
        """Validate the record.

        Raises:
            DataFormatAssumptionException: If the record does not fit the
                model. The error lists every failing field.
        """
        try:
            return self._model_class.model_validate(self._record)
        except ValidationError as e:
            raise DataFormatAssumptionException(
                errors=[dict(err) for err in e.errors()],
                failed_doc=self._record,
                model_name=self.model_name,
                request_url=self._request_url,
            ) from e

    @property
    def model_name(self) -> str:
        return self._model_class.__name__

    def __repr__(self) -> str:
        return (
            f"DeferredValidation({self.model_name}, "
            f"fields={sorted(self._record)})"
        )
