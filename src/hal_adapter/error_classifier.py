"""
ErrorClassifier module mapping response result levels onto typed failures
"""

import logging
from typing import Any, Dict, Optional, Union

from hal_adapter.api_response import APIResponse


class HALAdapterError(Exception):
    """Base exception for all errors raised by the access layer"""
    pass


class DataFailure(HALAdapterError):
    """Raised when the remote side failed to serve the data (5xx class)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationFailure(HALAdapterError):
    """Raised when the API rejected the client input (400 class)"""

    def __init__(self, message: str, status_code: int = 400,
                 errors: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or {}


class ErrorClassifier:
    """
    Classifies raw responses and keeps the last-response snapshot

    The snapshot is written before any failure is raised, so pagination and
    get_last_full_response_object always see the most recent response.
    """

    def __init__(self):
        self.last_response: Optional[APIResponse] = None
        self.logger = logging.getLogger(__name__)

    def classify(self, response: Union[APIResponse, bool]) -> bool:
        """
        Record the response and raise for failure result levels

        Args:
            response: Response from the transport, or the boolean sentinel it
                returns when no call could be completed

        Returns:
            True when the response can be interpreted, False on the silent
            transport failure path

        Raises:
            DataFailure: For failure result levels, message carries the HTTP code
            ValidationFailure: For validation-error result levels
        """
        if isinstance(response, bool):
            # Transport produced no response at all: record, do not raise
            self.last_response = APIResponse.transport_failure()
            self.logger.warning("Transport returned no response, recorded as failure")
            return False

        self.last_response = response.copy()

        if response.is_result_failure():
            self.logger.error(f"Remote data failure, HTTP {response.status_code}")
            raise DataFailure(
                "An error occurred when accessing internally the remote data. "
                f"Error HTTP: {response.status_code}",
                status_code=response.status_code
            )

        if response.is_result_validation_error():
            errors = response.raw_data.get('validation_messages') or {}
            self.logger.error(f"Input validation rejected by API, HTTP {response.status_code}")
            raise ValidationFailure(
                "Validations error during the input validation. Please correct input.",
                status_code=400,
                errors=errors if isinstance(errors, dict) else {'messages': errors}
            )

        return True
