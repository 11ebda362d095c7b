from dataclasses import dataclass
from typing import Dict, Iterable

from veryhttp.error import MissingDelimiterError


@dataclass(frozen=True)
class KeyValuePair:
    key: str
    value: str

    def __str__(self):
        return f"{self.key}={self.value}"


def parse_kv_pair(token: str) -> KeyValuePair:
    """Parse a key=value token.

    The token is split at the first '=' only, the value keeps any further
    '=' characters. Empty keys and values are accepted.

    Raises:
        MissingDelimiterError: if the token contains no '='.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise MissingDelimiterError(token)
    return KeyValuePair(key, value)


def fold_body(pairs: Iterable[KeyValuePair]) -> Dict[str, str]:
    """Build a request body from key-value pairs. Later pairs overwrite
    earlier ones with the same key."""
    body: Dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body
