"""
Generic access layer for resources exposed by a HAL-convention REST API
Provides find/create operations, result memoisation, pagination replay and typed API failures
"""

from .find_params import FindKind, FindParams, FindRequest, canonicalize_params
from .api_response import APIResponse, ResultLevel
from .error_classifier import ErrorClassifier, HALAdapterError, DataFailure, ValidationFailure
from .query_cache import QueryCache
from .response_interpreter import ResponseInterpreter
from .hal import HALOperations
from .url_utils import parse_query_params, encode_query_params
from .finder import Finder
from .paginator import Paginator
from .bulk_fetcher import BulkFetcher
from .resource_model import ResourceModel
from .model_registry import ModelRegistry
from .http_client import HTTPClient, APIRequest
from .config_loader import ConfigLoader, APIConfig, ConfigurationError
from .context import AdapterContext
from .logging_setup import configure_logging

__all__ = [
    'FindKind',
    'FindParams',
    'FindRequest',
    'canonicalize_params',
    'APIResponse',
    'ResultLevel',
    'ErrorClassifier',
    'HALAdapterError',
    'DataFailure',
    'ValidationFailure',
    'QueryCache',
    'ResponseInterpreter',
    'HALOperations',
    'parse_query_params',
    'encode_query_params',
    'Finder',
    'Paginator',
    'BulkFetcher',
    'ResourceModel',
    'ModelRegistry',
    'HTTPClient',
    'APIRequest',
    'ConfigLoader',
    'APIConfig',
    'ConfigurationError',
    'AdapterContext',
    'configure_logging'
]
