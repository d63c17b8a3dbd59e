"""
ResourceModel module, the per-resource entry point of the access layer
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from hal_adapter.api_response import APIResponse
from hal_adapter.bulk_fetcher import BulkFetcher
from hal_adapter.find_params import FindKind, FindParams
from hal_adapter.finder import Finder
from hal_adapter.logging_setup import log_message
from hal_adapter.paginator import Paginator


class ResourceModel:
    """
    Operations on one resource type served by a HAL API

    Composes the finder, paginator and bulk fetcher around one transport.
    Pagination works on a single cursor, the last ALL find of this model:
    do not interleave unrelated finds with pagination calls on the same
    instance. Not thread safe.
    """

    FIND_TYPE_ALL = FindKind.ALL
    FIND_TYPE_FIRST = FindKind.FIRST

    def __init__(self, transport: Any, api_particle: str,
                 max_turns: int = BulkFetcher.DEFAULT_MAX_TURNS,
                 default_count: Union[int, str] = BulkFetcher.DEFAULT_COUNT,
                 logger: Optional[logging.Logger] = None):
        """
        Args:
            transport: Object exposing fetch_first, fetch_all and
                create_or_update, such as HTTPClient
            api_particle: API resource name this model is bound to
            max_turns: Pagination ceiling for find_all
            default_count: Page size find_all requests when none is given
            logger: Logging sink, defaults to this module's logger
        """
        self.finder = Finder(transport, api_particle)
        self.paginator = Paginator(self.finder)
        self.bulk_fetcher = BulkFetcher(self.finder, self.paginator, max_turns, default_count)
        self.logger = logger or logging.getLogger(__name__)

    @property
    def api_particle(self) -> str:
        return self.finder.api_particle

    def set_api_particle(self, particle: str) -> None:
        """Force this model to use a different API particle for its calls"""
        self.finder.set_api_particle(particle)

    def find(self, kind: Union[FindKind, str] = FindKind.ALL,
             params: Union[FindParams, Mapping[str, Any], None] = None) -> Any:
        """
        Find elements of this resource

        'all' results are paginated, use find_next_elements or the count and
        page params to move through them.

        Args:
            kind: 'first' or 'all'
            params: Filters, pagination, embed directives

        Returns:
            Element(s) with HAL logic flattened into plain dicts

        Raises:
            ValidationFailure: For 400 errors
            DataFailure: For 500 errors
        """
        return self.finder.find(kind, params)

    def exists(self, resource_id: Any) -> bool:
        """True if the element with the given id exists"""
        return self.finder.exists(resource_id)

    def create(self, data: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Create or update an element

        Returns:
            Creation result with validation warnings and extra info

        Raises:
            ValidationFailure: For 400 errors
            DataFailure: For 500 errors
        """
        return self.finder.create(data)

    def find_all(self, params: Union[FindParams, Mapping[str, Any], None] = None) -> Any:
        """All elements matching params, every page concatenated"""
        return self.bulk_fetcher.find_all(params)

    def find_paginate(self, direction: str) -> Any:
        return self.paginator.find_paginate(direction)

    def find_next_elements(self) -> Any:
        """Next page after a find('all'), False if there is none"""
        return self.paginator.find_next_elements()

    def find_previous_elements(self) -> Any:
        """Previous page after a find('all'), False if there is none"""
        return self.paginator.find_previous_elements()

    def find_last_elements(self) -> Any:
        """Last page after a find('all'), False if there is none"""
        return self.paginator.find_last_elements()

    def find_count_elements(self) -> Any:
        """Total number of elements behind the last find('all')"""
        return self.paginator.find_count_elements()

    def get_last_full_response_object(self) -> Optional[APIResponse]:
        """Full last response, with headers and HAL collection metadata"""
        return self.finder.last_response

    @staticmethod
    def transform_id_to_returned_array(items: Iterable[Mapping[str, Any]],
                                       id_name: str) -> Dict[Any, Mapping[str, Any]]:
        """Index records by one of their fields, later duplicates win"""
        return {item.get(id_name): item for item in items}

    def log(self, message: str, level: Union[int, str] = 'info', **context: Any) -> None:
        log_message(self.logger, message, level, context)
