"""Exception types for extraction and fetch errors.

Page-shape problems derive from ScraperAssumptionException: the markup no
longer matches what a page profile expects. Network problems derive from
TransientException. Bad caller input raises InvalidParameterException.
"""

from typing import Any


class ScraperAssumptionException(Exception):
    """Base class for page-shape assumption violations.

    Page profiles make assumptions about markup structure and text formats.
    When these assumptions are violated, they raise clear, contextual
    exceptions that help diagnose which part of the page changed.
    """

    def __init__(
        self,
        message: str,
        request_url: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the assumption violation.
            request_url: The URL of the page being extracted.
            context: Optional dict of additional context (selector, counts, etc).
        """
        self.message = message
        self.request_url = request_url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]
        parts.append(f"URL: {self.request_url}")

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class HTMLStructuralAssumptionException(ScraperAssumptionException):
    """Raised when a selector matches a different number of nodes than expected.

    A required selector resolving to zero nodes, or a positional index past
    the end of a match list, both land here.

    Attributes:
        selector: The CSS selector that was used.
        selector_type: Type of selector (always "css").
        is_element_query: True if querying for elements, False for strings/attributes.
    """

    def __init__(
        self,
        selector: str,
        selector_type: str,
        description: str,
        expected_min: int,
        expected_max: int | None,
        actual_count: int,
        request_url: str,
        is_element_query: bool = True,
    ) -> None:
        """Initialize the exception.

        Args:
            selector: The CSS selector that was used.
            selector_type: Type of selector (always "css").
            description: Human-readable description of what was being selected.
            expected_min: Minimum number of elements expected.
            expected_max: Maximum number of elements expected (None = unlimited).
            actual_count: Actual number of elements found.
            request_url: The URL of the page being extracted.
            is_element_query: True if querying for elements (default), False for strings.
        """
        self.selector = selector
        self.selector_type = selector_type
        self.description = description
        self.expected_min = expected_min
        self.expected_max = expected_max
        self.actual_count = actual_count
        self.is_element_query = is_element_query

        if expected_max is None:
            expected_str = f"at least {expected_min}"
        elif expected_min == expected_max:
            expected_str = f"exactly {expected_min}"
        else:
            expected_str = f"between {expected_min} and {expected_max}"

        message = (
            f"HTML structure mismatch: Expected {expected_str} "
            f"elements for '{description}', but found {actual_count}"
        )

        context = {
            "selector": selector,
            "selector_type": selector_type,
            "expected_min": expected_min,
            "expected_max": expected_max
            if expected_max is not None
            else "unlimited",
            "actual_count": actual_count,
            "is_element_query": is_element_query,
        }

        super().__init__(message, request_url, context)


class PairingLengthMismatchException(ScraperAssumptionException):
    """Raised when parallel node sequences do not have the same length.

    Positional pairing reads element ``i`` of every sequence, so a length
    mismatch means the page no longer lines up and nothing is truncated or
    substituted.

    Attributes:
        description: What was being paired.
        lengths: Length of each sequence, in argument order.
    """

    def __init__(
        self,
        description: str,
        lengths: list[int],
        request_url: str = "",
    ) -> None:
        self.description = description
        self.lengths = lengths
        message = (
            f"Pairing mismatch for '{description}': sequences have "
            f"lengths {lengths}"
        )
        super().__init__(message, request_url, {"lengths": lengths})


class CompoundFieldException(ScraperAssumptionException):
    """Raised when a compound field's text does not match its pattern.

    Attributes:
        parser_name: Name of the compound parser that failed.
        text: The text that failed to match.
        pattern: The regular expression source.
    """

    def __init__(
        self,
        parser_name: str,
        text: str,
        pattern: str,
        request_url: str = "",
    ) -> None:
        self.parser_name = parser_name
        self.text = text
        self.pattern = pattern
        message = f"Compound field '{parser_name}' did not match {text!r}"
        super().__init__(
            message, request_url, {"pattern": pattern, "text": text}
        )


class DataFormatAssumptionException(ScraperAssumptionException):
    """Raised when extracted data doesn't match its typed model.

    This exception is raised during Pydantic validation of an extracted
    record, and means the page's text formats changed or the profile's
    decode rules need updating.
    """

    def __init__(
        self,
        errors: list[dict[str, Any]],
        failed_doc: dict[str, Any],
        model_name: str,
        request_url: str,
    ) -> None:
        """Initialize the exception.

        Args:
            errors: List of Pydantic validation errors.
            failed_doc: The record that failed validation.
            model_name: Name of the Pydantic model that was being validated against.
            request_url: The URL of the page that produced this record.
        """
        self.errors = errors
        self.failed_doc = failed_doc
        self.model_name = model_name

        error_summary = ", ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in errors
        )

        message = (
            f"Data validation failed for model '{model_name}': {error_summary}"
        )

        context = {
            "model": model_name,
            "error_count": len(errors),
            "errors": errors,
            "failed_doc": failed_doc,
        }

        super().__init__(message, request_url, context)


class InvalidParameterException(ValueError):
    """Raised when a page parameter (nickname, URL) is unusable.

    This is a configuration error on the caller's side, raised before any
    network activity.
    """

    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} {value!r}: {reason}")


class InvalidURLException(InvalidParameterException):
    """Raised when a URL fails validation before fetching."""

    def __init__(self, url: Any) -> None:
        super().__init__("url", url, "not an http(s) URL")


# =============================================================================
# Transient Exceptions
# =============================================================================


class TransientException(Exception):
    """Base class for transient errors that might resolve on retry.

    Transient exceptions represent temporary failures like network issues,
    server errors (5xx), or timeouts. Unlike assumption exceptions which
    indicate page profiles need updating, transient exceptions suggest
    fetching again later may succeed. Nothing in this package retries.
    """

    pass


class UnableToConnectException(TransientException):
    """Raised when the fetcher cannot reach the server.

    Attributes:
        url: The URL that could not be fetched.
        message: Human-readable error message.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.message = f"Unable to connect to {url}: {reason}"
        super().__init__(self.message)


class HTMLResponseAssumptionException(TransientException):
    """Raised when HTTP response has unexpected status code.

    Attributes:
        status_code: The actual HTTP status code received.
        expected_codes: List of status codes that were expected.
        url: The URL that returned the unexpected status.
        message: Human-readable error message.
    """

    def __init__(
        self,
        status_code: int,
        expected_codes: list[int],
        url: str,
    ) -> None:
        """Initialize the exception.

        Args:
            status_code: The actual status code received.
            expected_codes: List of expected status codes.
            url: The URL of the request.
        """
        self.status_code = status_code
        self.expected_codes = expected_codes
        self.url = url

        expected_str = ", ".join(str(code) for code in expected_codes)
        self.message = (
            f"HTTP {status_code} from {url} (expected one of: {expected_str})"
        )
        super().__init__(self.message)


class RequestTimeoutException(TransientException):
    """Raised when a request times out.

    Attributes:
        url: The URL that timed out.
        timeout_seconds: The timeout duration in seconds.
        message: Human-readable error message.
    """

    def __init__(self, url: str, timeout_seconds: float | None) -> None:
        """Initialize the exception.

        Args:
            url: The URL that timed out.
            timeout_seconds: The timeout duration in seconds.
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.message = f"Request to {url} timed out after {timeout_seconds}s"
        super().__init__(self.message)
