"""
Find parameter types and canonicalisation for resource lookups
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union


class FindKind(str, Enum):
    """Kind of lookup, also selects the shape of the interpreted result"""
    FIRST = 'first'
    ALL = 'all'
    COUNT = 'count'
    RAW = 'raw'


@dataclass
class FindParams:
    """
    Typed parameter set for a find call

    Recognised options are count, page and embed. Any other API filter goes
    into the open filters mapping and is passed through untouched.
    """
    count: Optional[Union[int, str]] = None
    page: Optional[int] = None
    embed: List[str] = field(default_factory=list)
    filters: Dict[str, Any] = field(default_factory=dict)

    RECOGNISED_OPTIONS = ('count', 'page', 'embed')

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> 'FindParams':
        """Split a plain parameter mapping into recognised options and filters"""
        embed = params.get('embed') or []
        if isinstance(embed, str):
            embed = [part for part in embed.split(',') if part]

        return cls(
            count=params.get('count'),
            page=params.get('page'),
            embed=list(embed),
            filters={
                key: value for key, value in params.items()
                if key not in cls.RECOGNISED_OPTIONS
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain parameter mapping as sent to the API"""
        params = dict(self.filters)
        if self.count is not None:
            params['count'] = self.count
        if self.page is not None:
            params['page'] = self.page
        if self.embed:
            params['embed'] = ','.join(self.embed)
        return params


def canonicalize_params(params: Union[FindParams, Mapping[str, Any], None]) -> Dict[str, Any]:
    """
    Normalise parameters into a plain, key-sorted structure

    Args:
        params: FindParams, any mapping, or None

    Returns:
        New dict whose nested mappings are sorted by key, with tuples turned
        into lists, sets into sorted lists and enums into their values
    """
    if params is None:
        return {}
    if isinstance(params, FindParams):
        params = params.to_dict()
    if not isinstance(params, Mapping):
        raise TypeError(f"Find parameters must be a mapping, got {type(params).__name__}")
    return _canonical_value(params)


def _canonical_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): _canonical_value(value[key]) for key in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [_canonical_value(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted((_canonical_value(item) for item in value), key=repr)
    return value


@dataclass(frozen=True)
class FindRequest:
    """A single issued find, kept for pagination replay"""
    kind: FindKind
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'kind', FindKind(self.kind))
        object.__setattr__(self, 'params', copy.deepcopy(canonicalize_params(self.params)))
