"""
Paginator module replaying the last collection fetch through its HAL links
"""

import logging
from typing import Any, Callable, Dict, Union

from hal_adapter.finder import Finder
from hal_adapter.find_params import FindKind
from hal_adapter.url_utils import parse_query_params


class Paginator:
    """Moves the last ALL find to adjacent pages or reads its total count"""

    DIRECTIONS = ('next', 'previous', 'last', 'count')

    def __init__(self, finder: Finder,
                 link_parser: Callable[[str], Union[Dict[str, Any], bool]] = parse_query_params):
        self.finder = finder
        self.link_parser = link_parser
        self.logger = logging.getLogger(__name__)

    def find_paginate(self, direction: str) -> Any:
        """
        Follow a pagination relation of the last collection response

        Args:
            direction: 'next', 'previous', 'last' or 'count'

        Returns:
            List of records of the target page, total item count for 'count',
            or False when there is no prior page or no such relation
        """
        if direction not in self.DIRECTIONS:
            raise ValueError(f"Unsupported pagination direction: {direction}")

        last_find = self.finder.last_find_state
        last_response = self.finder.last_response
        if last_find is None or last_find.kind is not FindKind.ALL or last_response is None:
            return False

        last_response.rewind()
        if not last_response.valid():
            return False

        if direction == 'count':
            total_items = last_response.get_total_items()
            return False if total_items is None else total_items

        link = last_response.get_link(direction)
        if link is None:
            self.logger.debug(f"No '{direction}' link on last {self.finder.api_particle} page")
            return False

        params = self.link_parser(link)
        if params is False:
            self.logger.debug(f"Could not parse '{direction}' link {link}")
            return False

        return self.finder.find(FindKind.ALL, params)

    def find_next_elements(self) -> Any:
        return self.find_paginate('next')

    def find_previous_elements(self) -> Any:
        return self.find_paginate('previous')

    def find_last_elements(self) -> Any:
        return self.find_paginate('last')

    def find_count_elements(self) -> Any:
        return self.find_paginate('count')
