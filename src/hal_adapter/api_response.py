"""
APIResponse module wrapping one raw HAL API response
"""

import copy
from datetime import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from hal_adapter.find_params import FindKind


class ResultLevel(str, Enum):
    """Result-level marker of an API call"""
    SUCCESS = 'success'
    FAILURE = 'failure'
    VALIDATION_ERROR = 'validation_error'


# HTTP status codes the API uses to reject client input
VALIDATION_STATUS_CODES = {400, 422}

# Lookups of a missing resource are an empty result, not a failure
NOT_FOUND_STATUS_CODES = {404}


def result_level_for_status(status_code: int) -> ResultLevel:
    """Map an HTTP status code onto a result level"""
    if 200 <= status_code < 300 or status_code in NOT_FOUND_STATUS_CODES:
        return ResultLevel.SUCCESS
    if status_code in VALIDATION_STATUS_CODES:
        return ResultLevel.VALIDATION_ERROR
    return ResultLevel.FAILURE


@dataclass
class APIResponse:
    """
    Raw response container with an element cursor

    Elements are walked with rewind/valid/current/next and can be replaced in
    place with set_current, which is how interpretation rewrites HAL elements
    into plain records without changing their order.
    """
    raw_data: Dict[str, Any] = field(default_factory=dict)
    status_code: int = 0
    find_type: FindKind = FindKind.ALL
    result_level: ResultLevel = ResultLevel.SUCCESS
    elements: List[Any] = field(default_factory=list)
    collection_metadata: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    request_timestamp: datetime = field(default_factory=datetime.now)
    position: int = field(default=0, repr=False)

    def __post_init__(self):
        self.find_type = FindKind(self.find_type)
        self.result_level = ResultLevel(self.result_level)

    @classmethod
    def from_payload(cls, payload: Any, status_code: int, find_type: FindKind,
                     collection: bool = True,
                     headers: Optional[Dict[str, str]] = None) -> 'APIResponse':
        """
        Build a response from a decoded JSON body

        Args:
            payload: Decoded body
            status_code: HTTP status code
            find_type: Kind of the originating call, selects the result shape
            collection: True when the body is a HAL collection, False when it
                is a single resource
            headers: Response headers

        Returns:
            APIResponse with elements and collection metadata split out
        """
        if not isinstance(payload, dict):
            payload = {'text': payload} if payload not in (None, '') else {}

        find_type = FindKind(find_type)
        result_level = result_level_for_status(status_code)
        elements: List[Any] = []
        metadata: Dict[str, Any] = {}

        if 200 <= status_code < 300:
            if find_type is FindKind.RAW or not collection:
                elements = [payload] if payload else []
            else:
                elements = cls._extract_embedded_elements(payload)
                metadata = {key: value for key, value in payload.items() if key != '_embedded'}

        return cls(
            raw_data=payload,
            status_code=status_code,
            find_type=find_type,
            result_level=result_level,
            elements=elements,
            collection_metadata=metadata,
            headers=dict(headers or {})
        )

    @classmethod
    def transport_failure(cls) -> 'APIResponse':
        """Synthesised response for a call the transport could not complete"""
        return cls(result_level=ResultLevel.FAILURE)

    @staticmethod
    def _extract_embedded_elements(payload: Dict[str, Any]) -> List[Any]:
        embedded = payload.get('_embedded')
        if not isinstance(embedded, dict):
            return []
        for value in embedded.values():
            if isinstance(value, list):
                return list(value)
        return []

    # Cursor

    def rewind(self) -> None:
        self.position = 0

    def valid(self) -> bool:
        return 0 <= self.position < len(self.elements)

    def current(self) -> Any:
        if not self.valid():
            return None
        return self.elements[self.position]

    def next(self) -> None:
        self.position += 1

    def set_current(self, value: Any) -> None:
        """Replace the element under the cursor"""
        if not self.valid():
            raise IndexError("No current element to replace")
        self.elements[self.position] = value

    def __iter__(self) -> Iterator[Any]:
        self.rewind()
        while self.valid():
            yield self.current()
            self.next()

    def __len__(self) -> int:
        return len(self.elements)

    # Result level

    def is_result_success(self) -> bool:
        return self.result_level is ResultLevel.SUCCESS

    def is_result_failure(self) -> bool:
        return self.result_level is ResultLevel.FAILURE

    def is_result_validation_error(self) -> bool:
        return self.result_level is ResultLevel.VALIDATION_ERROR

    def set_result_success_level(self, level: ResultLevel) -> None:
        self.result_level = ResultLevel(level)

    # Collection metadata

    def get_total_items(self) -> Optional[int]:
        total_items = self.collection_metadata.get('total_items')
        if total_items is None:
            return None
        return int(total_items)

    def get_link(self, relation: str) -> Optional[str]:
        """Return the href of a named relation in the collection links"""
        links = self.collection_metadata.get('_links') or {}
        link = links.get(relation)
        if isinstance(link, dict):
            return link.get('href')
        if isinstance(link, str):
            return link
        return None

    def copy(self) -> 'APIResponse':
        """Independent value copy, later changes to self do not leak into it"""
        return copy.deepcopy(self)

    def get_result_data_according_find_type(self) -> Any:
        """
        Result shape for the originating find kind

        Returns:
            list of elements for ALL, first element (or {}) for FIRST, total
            item count for COUNT, untouched payload for RAW
        """
        if self.find_type is FindKind.ALL:
            return list(self.elements)
        if self.find_type is FindKind.FIRST:
            return self.elements[0] if self.elements else {}
        if self.find_type is FindKind.COUNT:
            return self.get_total_items() or 0
        return self.raw_data
