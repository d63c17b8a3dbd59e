"""
BulkFetcher module assembling complete collections across pages
"""

import logging
from typing import Any, List, Mapping, Union

from hal_adapter.finder import Finder
from hal_adapter.find_params import FindKind, FindParams, canonicalize_params
from hal_adapter.paginator import Paginator


class BulkFetcher:
    """Walks next links until exhaustion, bounded by a turn ceiling"""

    DEFAULT_MAX_TURNS = 50
    DEFAULT_COUNT = 'max'

    def __init__(self, finder: Finder, paginator: Paginator,
                 max_turns: int = DEFAULT_MAX_TURNS, default_count: Union[int, str] = DEFAULT_COUNT):
        if max_turns < 1:
            raise ValueError(f"max_turns must be a positive integer, got {max_turns}")
        self.finder = finder
        self.paginator = paginator
        self.max_turns = max_turns
        self.default_count = default_count
        self.logger = logging.getLogger(__name__)

    def find_all(self, params: Union[FindParams, Mapping[str, Any], None] = None) -> List[Any]:
        """
        Fetch every page of a filtered collection

        Args:
            params: Filters; count defaults to the configured page size and
                page to 1

        Returns:
            Concatenation of all fetched pages, in page order

        Raises:
            DataFailure, ValidationFailure: From any page, aborting the walk
        """
        params = canonicalize_params(params)
        params.setdefault('count', self.default_count)
        params.setdefault('page', 1)

        first_page = self.finder.find(FindKind.ALL, params)
        if not first_page:
            return first_page

        results = list(first_page)
        turns = 0
        while turns < self.max_turns:
            next_page = self.paginator.find_next_elements()
            turns += 1
            if next_page is False or not next_page:
                break
            results.extend(next_page)
        else:
            self.logger.warning(
                f"Stopped paging {self.finder.api_particle} after {self.max_turns} turns, "
                f"{len(results)} records collected"
            )

        self.logger.debug(f"Collected {len(results)} {self.finder.api_particle} records in {turns} turns")
        return results
