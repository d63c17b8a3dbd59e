"""
QueryCache module for memoising interpreted find results
"""

import copy
import json
import hashlib
import logging
from typing import Any, Dict, Mapping, Optional, Union

from hal_adapter.find_params import FindKind, FindParams, canonicalize_params


class QueryCache:
    """
    In-memory cache of interpreted results keyed by (kind, params)

    Entries live as long as the owning model: there is no expiry, no size
    bound and no invalidation. Not synchronised, guard with a lock if one
    instance is shared between threads.
    """

    def __init__(self):
        self._entries: Dict[str, Any] = {}
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def generate_cache_key(kind: Union[FindKind, str],
                           params: Union[FindParams, Mapping[str, Any], None]) -> str:
        """
        Generate a deterministic cache key for a find

        Args:
            kind: Find kind
            params: Find parameters, in any insertion order

        Returns:
            MD5 hash string to use as cache key
        """
        cache_data = {
            'kind': FindKind(kind).value,
            'params': canonicalize_params(params)
        }

        # Sorted keys make the digest independent of how params were built
        cache_string = json.dumps(cache_data, sort_keys=True, default=str)

        return hashlib.md5(cache_string.encode('utf-8')).hexdigest()

    def get(self, cache_key: str) -> Optional[Any]:
        """Return a copy of the stored entry, or None on a miss"""
        if cache_key not in self._entries:
            return None
        return copy.deepcopy(self._entries[cache_key])

    def put(self, cache_key: str, entry: Any) -> None:
        """
        Store an interpreted result

        Entries are immutable once stored, a second put for the same key is
        ignored.
        """
        if cache_key in self._entries:
            self.logger.debug(f"Cache entry {cache_key} already stored, keeping original")
            return
        self._entries[cache_key] = copy.deepcopy(entry)

    def __contains__(self, cache_key: str) -> bool:
        return cache_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
