"""
Shared fixtures for the HAL adapter test suite
"""

import pytest
from unittest.mock import Mock
from hal_adapter.api_response import APIResponse
from hal_adapter.find_params import FindKind


BASE_URL = "https://api.test.com/v2"


def build_page(items, total_items=None, links=None, status_code=200, particle='users'):
    """Build a HAL collection response for one page"""
    payload = {
        '_embedded': {particle: items},
        'total_items': len(items) if total_items is None else total_items,
        '_links': {
            relation: {'href': href} for relation, href in (links or {}).items()
        }
    }
    return APIResponse.from_payload(payload, status_code=status_code, find_type=FindKind.ALL)


def build_record(record, status_code=200, find_type=FindKind.FIRST):
    """Build a single-resource response"""
    return APIResponse.from_payload(record, status_code=status_code, find_type=find_type, collection=False)


@pytest.fixture
def make_page():
    return build_page


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def transport():
    """Mocked transport honouring the fetch_first/fetch_all/create_or_update contract"""
    return Mock(spec=['fetch_first', 'fetch_all', 'create_or_update'])


@pytest.fixture
def endless_pages():
    """
    Transport side effect that always answers with one record and a next link
    """
    def _fetch_all(particle, params):
        page = int(params.get('page', 1))
        return build_page(
            [{'id': page}],
            total_items=10_000,
            links={'next': f"{BASE_URL}/{particle}?count={params.get('count', 'max')}&page={page + 1}"}
        )
    return _fetch_all
