"""
URL helpers for turning pagination links into find parameters and back
"""

import re
from typing import Any, Dict, List, Mapping, Tuple, Union
from urllib.parse import parse_qsl, urlsplit

_BRACKET_KEY = re.compile(r'^([^\[\]]+)((?:\[[^\[\]]*\])+)$')


def parse_query_params(url: str) -> Union[Dict[str, Any], bool]:
    """
    Parse the query string of a URL into a parameter mapping

    Bracket notation is expanded: 'filter[name]=x' becomes
    {'filter': {'name': 'x'}} and 'ids[]=1&ids[]=2' becomes {'ids': [1, 2]}.
    Integer strings that survive a round trip are converted to int. Empty
    segments and nameless fields are skipped.

    Args:
        url: Absolute or relative URL

    Returns:
        Parameter dict, or False if the URL has no usable query string
    """
    if not isinstance(url, str) or not url:
        return False

    try:
        query = urlsplit(url).query
        if not query:
            return False
        pairs = parse_qsl(query, keep_blank_values=True)
    except ValueError:
        return False

    params: Dict[str, Any] = {}
    for key, value in pairs:
        if key:
            _assign(params, key, _coerce(value))
    return params or False


def _coerce(value: str) -> Any:
    try:
        number = int(value)
    except ValueError:
        return value
    return number if str(number) == value else value


def _assign(params: Dict[str, Any], key: str, value: Any) -> None:
    match = _BRACKET_KEY.match(key)
    if not match:
        params[key] = value
        return

    path = [match.group(1)] + re.findall(r'\[([^\[\]]*)\]', match.group(2))
    target: Any = params
    for position, part in enumerate(path):
        last = position == len(path) - 1
        following = None if last else path[position + 1]

        if isinstance(target, list):
            if last:
                target.append(value)
                return
            container: Any = [] if following == '' else {}
            target.append(container)
            target = container
            continue

        if last:
            target[part] = value
            return
        if part not in target or not isinstance(target[part], (dict, list)):
            target[part] = [] if following == '' else {}
        target = target[part]


def encode_query_params(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten a nested parameter mapping into query pairs using bracket notation

    Args:
        params: Possibly nested parameter mapping

    Returns:
        List of (key, value) pairs suitable for requests' params argument
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        _encode(str(key), value, pairs)
    return pairs


def _encode(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if isinstance(value, Mapping):
        for key, nested in value.items():
            _encode(f"{prefix}[{key}]", nested, pairs)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _encode(f"{prefix}[]", item, pairs)
    elif value is None:
        return
    elif isinstance(value, bool):
        pairs.append((prefix, 'true' if value else 'false'))
    else:
        pairs.append((prefix, str(value)))
