"""
HTTPClient module implementing the transport for HAL API resources
"""

import logging
import requests
from typing import Dict, Any, Optional, Tuple, Union
from dataclasses import dataclass, field
from urllib.parse import quote

from hal_adapter.api_response import APIResponse
from hal_adapter.find_params import FindKind
from hal_adapter.url_utils import encode_query_params


@dataclass
class APIRequest:
    """Represents a single API request"""
    url: str
    parameters: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = "GET"
    json_body: Optional[Dict[str, Any]] = None


class HTTPClient:
    """
    HTTP transport for one HAL API

    Failed HTTP statuses are returned as responses carrying a result level.
    A call that cannot be completed at all returns False.
    """

    DEFAULT_HEADERS = {'Accept': 'application/hal+json'}

    def __init__(self, base_url: str, timeout: float = 30.0,
                 headers: Optional[Dict[str, str]] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.headers: Dict[str, str] = {**self.DEFAULT_HEADERS, **(headers or {})}
        self.session: Optional[requests.Session] = None
        self.logger = logging.getLogger(__name__)

    def build_url(self, particle: str, resource_id: Any = None) -> str:
        """
        Build the URL of a collection or of one resource in it

        Args:
            particle: API resource name, e.g. 'users'
            resource_id: Optional identifier of a single resource

        Returns:
            Absolute URL
        """
        url = f"{self.base_url}/{particle.strip('/')}"
        if resource_id is not None:
            url = f"{url}/{quote(str(resource_id), safe='')}"
        return url

    def fetch_first(self, particle: str, params: Dict[str, Any]) -> Union[APIResponse, bool]:
        """
        Fetch a single resource

        With an 'id' parameter the resource URL is requested directly,
        otherwise the first element of the filtered collection is requested.
        """
        params = dict(params)
        resource_id, params = self._split_id(params)

        if resource_id is not None:
            request = APIRequest(url=self.build_url(particle, resource_id), parameters=params)
            return self.make_request(request, FindKind.FIRST, collection=False)

        params.setdefault('count', 1)
        request = APIRequest(url=self.build_url(particle), parameters=params)
        return self.make_request(request, FindKind.FIRST, collection=True)

    def fetch_all(self, particle: str, params: Dict[str, Any]) -> Union[APIResponse, bool]:
        """Fetch one page of a collection"""
        request = APIRequest(url=self.build_url(particle), parameters=dict(params))
        return self.make_request(request, FindKind.ALL, collection=True)

    def create_or_update(self, particle: str, data: Dict[str, Any]) -> Union[APIResponse, bool]:
        """
        Create a resource, or update it when data carries an 'id'

        Args:
            particle: API resource name
            data: Resource attributes, sent as JSON body

        Returns:
            APIResponse of kind RAW, or False if the call could not be made
        """
        resource_id, _ = self._split_id(dict(data))

        if resource_id is not None:
            request = APIRequest(
                url=self.build_url(particle, resource_id),
                parameters={},
                method="PUT",
                json_body=dict(data)
            )
        else:
            request = APIRequest(
                url=self.build_url(particle),
                parameters={},
                method="POST",
                json_body=dict(data)
            )
        return self.make_request(request, FindKind.RAW, collection=False)

    def make_request(self, request: APIRequest, find_type: FindKind,
                     collection: bool = True) -> Union[APIResponse, bool]:
        """
        Send one request and wrap the answer

        Args:
            request: APIRequest object containing request details
            find_type: Kind of the originating call
            collection: Whether the body is a HAL collection

        Returns:
            APIResponse for any HTTP answer, False when no answer was received
        """
        # Create session if not exists
        if self.session is None:
            self.session = requests.Session()

        combined_headers = {**self.headers, **request.headers}

        try:
            response = self.session.request(
                request.method,
                request.url,
                params=encode_query_params(request.parameters) or None,
                json=request.json_body,
                headers=combined_headers,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{request.method} {request.url} could not be completed: {e}")
            return False

        try:
            payload = response.json()
        except ValueError:
            # Handle non-JSON responses
            payload = {'text': response.text} if response.text else {}

        self.logger.debug(f"{request.method} {request.url} answered HTTP {response.status_code}")

        return APIResponse.from_payload(
            payload,
            status_code=response.status_code,
            find_type=find_type,
            collection=collection,
            headers=dict(response.headers)
        )

    def close_connection(self) -> None:
        """
        Close HTTP session and release resources
        """
        if self.session:
            self.session.close()
            self.session = None

    @staticmethod
    def _split_id(params: Dict[str, Any]) -> Tuple[Any, Dict[str, Any]]:
        resource_id = params.get('id')
        if resource_id is None or isinstance(resource_id, (dict, list, tuple)):
            return None, params
        remaining = {key: value for key, value in params.items() if key != 'id'}
        return resource_id, remaining
