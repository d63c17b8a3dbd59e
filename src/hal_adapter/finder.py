"""
Finder module orchestrating a single logical fetch
"""

import copy
import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from hal_adapter.api_response import APIResponse
from hal_adapter.error_classifier import ErrorClassifier
from hal_adapter.find_params import FindKind, FindParams, FindRequest
from hal_adapter.query_cache import QueryCache
from hal_adapter.response_interpreter import ResponseInterpreter


class Finder:
    """
    Cache lookup, transport dispatch, classification and interpretation

    The transport is any object exposing fetch_first, fetch_all and
    create_or_update(particle, params) returning an APIResponse or False.
    One query cache is kept per API particle so that rebinding the particle
    never serves results of another resource. Next to each cached result the
    request and raw response that produced it are kept, so a cache hit moves
    the pagination cursor exactly like a transport call would.
    """

    SEARCH_KINDS = (FindKind.FIRST, FindKind.ALL)

    def __init__(self, transport: Any, api_particle: str,
                 error_classifier: Optional[ErrorClassifier] = None,
                 response_interpreter: Optional[ResponseInterpreter] = None):
        self.transport = transport
        self.api_particle = api_particle
        self.error_classifier = error_classifier or ErrorClassifier()
        self.response_interpreter = response_interpreter or ResponseInterpreter()
        self.last_find_state: Optional[FindRequest] = None
        self._caches: Dict[str, QueryCache] = {}
        self._find_states: Dict[Tuple[str, str], Tuple[FindRequest, APIResponse]] = {}
        self.logger = logging.getLogger(__name__)

    @property
    def query_cache(self) -> QueryCache:
        """Cache bound to the current API particle"""
        if self.api_particle not in self._caches:
            self._caches[self.api_particle] = QueryCache()
        return self._caches[self.api_particle]

    @property
    def last_response(self) -> Optional[APIResponse]:
        """Snapshot of the most recent raw response"""
        return self.error_classifier.last_response

    def set_api_particle(self, particle: str) -> None:
        """Rebind to another particle, dropping the pagination cursor of the old one"""
        if particle == self.api_particle:
            return
        self.api_particle = particle
        self.last_find_state = None
        self.error_classifier.last_response = None

    def find(self, kind: Union[FindKind, str] = FindKind.ALL,
             params: Union[FindParams, Mapping[str, Any], None] = None) -> Any:
        """
        Find elements of the bound resource

        Args:
            kind: FindKind.FIRST for a single record, FindKind.ALL for one
                page of the collection
            params: Filters, count, page, embed directives

        Returns:
            Flattened record for FIRST, list of flattened records for ALL

        Raises:
            ValueError: If kind is not FIRST or ALL
            DataFailure: For failure result levels
            ValidationFailure: For validation-error result levels
        """
        kind = FindKind(kind)
        if kind not in self.SEARCH_KINDS:
            raise ValueError(f"Unsupported find kind: {kind.value}")

        request = FindRequest(kind, params)
        cache_key = QueryCache.generate_cache_key(request.kind, request.params)

        if cache_key in self.query_cache:
            self.logger.debug(f"Cache hit for {kind.value} find on {self.api_particle}")
            self._restore_find_state(cache_key)
            return self.query_cache.get(cache_key)

        self.last_find_state = request

        self.logger.info(f"Fetching {kind.value} {self.api_particle} with params {request.params}")
        if kind is FindKind.FIRST:
            response = self.transport.fetch_first(self.api_particle, copy.deepcopy(request.params))
        else:
            response = self.transport.fetch_all(self.api_particle, copy.deepcopy(request.params))

        if not self.error_classifier.classify(response):
            return APIResponse(find_type=kind).get_result_data_according_find_type()

        result = self.response_interpreter.interpret(response)
        self.query_cache.put(cache_key, result)
        self._find_states.setdefault(
            (self.api_particle, cache_key),
            (request, self.error_classifier.last_response.copy())
        )

        return result

    def _restore_find_state(self, cache_key: str) -> None:
        state = self._find_states.get((self.api_particle, cache_key))
        if state is None:
            return
        request, response = state
        self.last_find_state = request
        self.error_classifier.last_response = response.copy()

    def exists(self, resource_id: Any) -> bool:
        """
        Check that a record with the given id exists

        Failures raised by find propagate.
        """
        result = self.find(FindKind.FIRST, {'id': resource_id})
        return result is not False and bool(result)

    def create(self, data: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Create or update a record, never cached

        Args:
            data: Record attributes, an 'id' turns the call into an update

        Returns:
            Untouched response payload with validation warnings and extra info
        """
        response = self.transport.create_or_update(self.api_particle, copy.deepcopy(dict(data or {})))
        if isinstance(response, APIResponse):
            response.find_type = FindKind.RAW

        if not self.error_classifier.classify(response):
            return APIResponse(find_type=FindKind.RAW).get_result_data_according_find_type()

        return self.response_interpreter.interpret(response)
