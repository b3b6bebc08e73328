# domain/query.py
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

QueryValue = Union[str, Sequence[str]]
QueryParams = Union[Mapping[str, QueryValue], Iterable[Tuple[str, str]]]


def _group(params: QueryParams) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {}
    if isinstance(params, Mapping):
        for key, value in params.items():
            if isinstance(value, str) or not isinstance(value, Sequence):
                grouped.setdefault(key, []).append(str(value))
            else:
                grouped.setdefault(key, []).extend(str(v) for v in value)
        return grouped

    for key, value in params:
        grouped.setdefault(key, []).append(str(value))
    return grouped


def encode_query(params: Optional[QueryParams]) -> str:
    """
    Encode query parameters as "key=value" pairs joined by "&".

    Keys are sorted, values of one key keep their order, and both are
    form-encoded (a space becomes "+"). No parameters give "".
    """
    if not params:
        return ""

    grouped = _group(params)
    pairs = []
    for key in sorted(grouped):
        encoded_key = quote_plus(key)
        for value in grouped[key]:
            pairs.append(f"{encoded_key}={quote_plus(value)}")
    return "&".join(pairs)
