"""
Collection and canonicalization of the parameters that take part
in an OAuth 1.0 signature (RFC 5849 §3.4.1.3).
"""

import base64
import logging
import dataclasses as dc
from typing import Callable, Iterable, List, Optional, Tuple, Union

from .encoding import percent_encode, url_decode
from .errors import RandomSourceError

logger = logging.getLogger("oauthsign.params")

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
NONCE_BYTES = 32

# Either "name=value" or an already split (name, value) pair
RequestParam = Union[str, Tuple[str, str]]


@dc.dataclass(frozen=True)
class Parameter:
    """Name/value pair together with its percent-encoded form."""
    name: str
    value: str
    encoded_name: str
    encoded_value: str

    @classmethod
    def create(cls, name: str, value: str) -> "Parameter":
        return cls(name, value, percent_encode(name), percent_encode(value))

    def sort_key(self) -> Tuple[str, str]:
        return self.encoded_name, self.encoded_value

    def pair(self) -> str:
        return f"{self.encoded_name}={self.encoded_value}"

    def quoted_pair(self) -> str:
        return f'{self.encoded_name}="{self.encoded_value}"'


def split_url(url: str) -> Tuple[str, Optional[str]]:
    """Split a URL at the first `?` into the base URL and the query string.
    The query string is None if the URL has no `?`."""
    base_url, qmark, query = url.partition("?")
    return base_url, (query if qmark else None)


def query_params(url: str) -> List[Parameter]:
    """Parameters found in the query string of `url`, URL-decoded."""
    _, query = split_url(url)
    if query is None:
        return []
    result = []
    for piece in query.split("&"):
        name, _, value = piece.partition("=")
        result.append(Parameter.create(url_decode(name), url_decode(value)))
    return result


def request_param(param: RequestParam) -> Parameter:
    """Explicit (body) parameter. Strings are split on the first `=`
    and taken verbatim, without any decoding."""
    if isinstance(param, str):
        name, _, value = param.partition("=")
    else:
        name, value = param
    return Parameter.create(name, value)


def request_params(params: Iterable[RequestParam]) -> List[Parameter]:
    return [request_param(p) for p in params]


def make_nonce(random_source: Callable[[int], bytes]) -> str:
    """
    Base64 of NONCE_BYTES random bytes, stripped to alphanumerics.
    Raises RandomSourceError if the source cannot deliver.
    """
    try:
        raw = random_source(NONCE_BYTES)
    except (NotImplementedError, OSError) as e:
        logger.error(f"Random source failed: {e}")
        raise RandomSourceError(f"Could not read {NONCE_BYTES} random bytes: {e}") from e
    if raw is None or len(raw) != NONCE_BYTES:
        logger.error("Random source returned short read")
        raise RandomSourceError(f"Could not read {NONCE_BYTES} random bytes!")
    encoded = base64.b64encode(raw).decode("ascii")
    return "".join(c for c in encoded if c.isalnum())


def make_timestamp(clock: Callable[[], float]) -> str:
    return str(int(clock()))


def protocol_params(*,
                    consumer_key: str,
                    token: str,
                    timestamp: str,
                    nonce: str) -> List[Parameter]:
    """OAuth protocol parameters without `oauth_signature`. Consumer key
    and token are left out when empty."""
    result = []
    if consumer_key:
        result.append(Parameter.create("oauth_consumer_key", consumer_key))
    if token:
        result.append(Parameter.create("oauth_token", token))
    result.append(Parameter.create("oauth_signature_method", SIGNATURE_METHOD))
    result.append(Parameter.create("oauth_timestamp", timestamp))
    result.append(Parameter.create("oauth_nonce", nonce))
    result.append(Parameter.create("oauth_version", OAUTH_VERSION))
    return result


def sort_params(params: Iterable[Parameter]) -> List[Parameter]:
    """Ordinal sort on encoded name, then encoded value."""
    return sorted(params, key=Parameter.sort_key)


def canonicalize(*param_lists: Iterable[Parameter]) -> str:
    """
    Merge the given parameter lists into the normalized parameter
    string: sorted, `name=value` joined by `&`.
    """
    merged: List[Parameter] = []
    for params in param_lists:
        merged.extend(params)
    return "&".join(p.pair() for p in sort_params(merged))
