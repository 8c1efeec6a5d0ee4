import hmac
import shlex
import sys
import os
import time
import base64
import hashlib
import logging
from typing import Callable, Iterable, List, Optional, IO

from .encoding import percent_encode
from .errors import MissingFieldError, ModeConflictError, CryptoPrimitiveError
from .params import \
    Parameter, \
    RequestParam, \
    split_url, \
    query_params, \
    request_params, \
    protocol_params, \
    make_nonce, \
    make_timestamp, \
    canonicalize

logger = logging.getLogger("oauthsign.signer")

HTTP_METHODS = ("GET", "POST", "DELETE", "PUT", "HEAD")
AUTHORIZATION_SCHEME = "OAuth"

# Fields which must be set before anything can be signed
REQUIRED_FIELDS = ("consumer_key", "consumer_secret", "http_method", "base_url")


def signature_base_string(http_method: str, url: str, normalized_params: str) -> str:
    """
    METHOD&enc(base url)&enc(normalized parameters). The parameter string
    is already encoded once, so escaped characters end up as `%25XX`.
    """
    base_url, _ = split_url(url)
    return "&".join((
        http_method.upper(),
        percent_encode(base_url),
        percent_encode(normalized_params)))


def signing_key(consumer_secret: str, token_secret: str) -> str:
    # Trailing `&` stays when there is no token secret.
    return percent_encode(consumer_secret) + "&" + percent_encode(token_secret)


def sign_hmac_sha1(base_string: str, key: str) -> str:
    """Base64 of the HMAC-SHA1 digest of `base_string`."""
    try:
        digest = hmac.new(
            key.encode("utf-8"),
            base_string.encode("utf-8"),
            hashlib.sha1
        ).digest()
        return base64.b64encode(digest).decode("ascii")
    except (ValueError, TypeError) as e:
        raise CryptoPrimitiveError(f"HMAC-SHA1 signing failed: {e}") from e


class Signer:

    def __init__(self, *,
                 random_source: Callable[[int], bytes] = os.urandom,
                 clock: Callable[[], float] = time.time,
                 show_signature_base: bool = False,
                 diagnostic_stream: Optional[IO] = None):
        """
        Brief

            Builder which collects the parts of an HTTP request and signs
            it with OAuth 1.0 HMAC-SHA1 (RFC 5849 §3).

            Setters may be called in any order. Every setter drops a
            signature computed earlier, so the next call to one of the
            output methods runs the whole pipeline again with a fresh
            nonce and timestamp.

        Example

            signer = Signer()
            signer.set_consumer_key("key")
            signer.set_consumer_secret("secret")
            signer.set_http_method("GET")
            signer.set_base_url("https://api.example.com/items?page=2")
            header = signer.authorization_header()

        Arguments

            `random_source`: Callable returning n random bytes, used for the nonce.

            `clock`: Callable returning the current Unix time, used for the timestamp.

            `show_signature_base`: Write every computed signature base string
              to `diagnostic_stream` (stderr if not given).
        """
        self.random_source = random_source
        self.clock = clock
        self.show_signature_base = show_signature_base
        self.diagnostic_stream = diagnostic_stream
        self._reset()

    def _reset(self):
        self._fields = {
            "consumer_key": None,
            "consumer_secret": None,
            "token": Parameter.create("token", ""),
            "token_secret": Parameter.create("token_secret", ""),
            "http_method": None,
            "base_url": None,
        }
        self._request_params: List[Parameter] = []
        self._nonce_override: Optional[str] = None
        self._timestamp_override: Optional[str] = None
        self._invalidate()

    def _invalidate(self):
        self._nonce: Optional[str] = None
        self._timestamp: Optional[str] = None
        self._protocol_params: List[Parameter] = []
        self._base_string: Optional[str] = None
        self._signature: Optional[Parameter] = None

    def _set(self, field_name: str, value: str):
        self._fields[field_name] = Parameter.create(field_name, value)
        self._invalidate()

    def _get(self, field_name: str) -> Optional[str]:
        param = self._fields[field_name]
        return param.value if param else None

    # ==================== Setters and Getters ====================

    def set_consumer_key(self, value: str):
        self._set("consumer_key", value)

    def consumer_key(self) -> Optional[str]:
        return self._get("consumer_key")

    def set_consumer_secret(self, value: str):
        self._set("consumer_secret", value)

    def consumer_secret(self) -> Optional[str]:
        return self._get("consumer_secret")

    def set_token(self, value: str):
        self._set("token", value)

    def token(self) -> Optional[str]:
        return self._get("token")

    def set_token_secret(self, value: str):
        self._set("token_secret", value)

    def token_secret(self) -> Optional[str]:
        return self._get("token_secret")

    def set_http_method(self, value: str):
        self._set("http_method", value.upper())

    def http_method(self) -> Optional[str]:
        return self._get("http_method")

    def set_base_url(self, value: str):
        self._set("base_url", value)

    def base_url(self) -> Optional[str]:
        return self._get("base_url")

    def set_request_params(self, params: Iterable[RequestParam]):
        self._request_params = request_params(params)
        self._invalidate()

    def request_params(self) -> List[str]:
        return [f"{p.name}={p.value}" for p in self._request_params]

    def set_nonce(self, value: Optional[str]):
        """Pin the nonce instead of drawing it from the random source.
        Passing None goes back to random nonces."""
        self._nonce_override = value
        self._invalidate()

    def set_timestamp(self, value: Optional[str]):
        """Pin the timestamp instead of reading the clock."""
        self._timestamp_override = None if value is None else str(value)
        self._invalidate()

    def nonce(self) -> Optional[str]:
        return self._nonce

    def timestamp(self) -> Optional[str]:
        return self._timestamp

    def signature(self) -> Optional[str]:
        return self._signature.value if self._signature else None

    def is_signed(self) -> bool:
        return self._signature is not None

    # ==================== Pipeline ====================

    def _check_required(self):
        for field_name in REQUIRED_FIELDS:
            if self._fields[field_name] is None:
                raise MissingFieldError(field_name)

    def _sign(self, query_mode: bool = False):
        if query_mode and self._request_params:
            raise ModeConflictError(len(self._request_params))
        self._check_required()
        if self._signature is not None:
            return

        method = self._get("http_method")
        url = self._get("base_url")
        logger.debug(f"Signing {method} {split_url(url)[0]}")

        self._nonce = self._nonce_override
        if self._nonce is None:
            self._nonce = make_nonce(self.random_source)
        self._timestamp = self._timestamp_override
        if self._timestamp is None:
            self._timestamp = make_timestamp(self.clock)
        self._protocol_params = protocol_params(
            consumer_key=self._get("consumer_key"),
            token=self._get("token"),
            timestamp=self._timestamp,
            nonce=self._nonce)

        normalized = canonicalize(query_params(url), self._request_params, self._protocol_params)
        base_string = signature_base_string(method, url, normalized)
        if self.show_signature_base:
            print(base_string, file=self.diagnostic_stream or sys.stderr)

        key = signing_key(self._get("consumer_secret"), self._get("token_secret"))
        self._signature = Parameter.create("oauth_signature", sign_hmac_sha1(base_string, key))
        self._base_string = base_string
        logger.debug(f"Computed signature with nonce={self._nonce}, timestamp={self._timestamp}")

    def _output_params(self) -> List[Parameter]:
        # Presentation order is by raw name, independent of the signing sort.
        return sorted(self._protocol_params + [self._signature], key=lambda p: p.name)

    def signature_base(self) -> str:
        self._sign()
        return self._base_string

    def authorization_header(self) -> str:
        """Value for the `Authorization` request header."""
        self._sign()
        return f"{AUTHORIZATION_SCHEME} " + ", ".join(p.quoted_pair() for p in self._output_params())

    def query_suffix(self) -> str:
        """Protocol parameters as suffix for the request URL."""
        self._sign(query_mode=True)
        _, query = split_url(self._get("base_url"))
        prefix = "?" if query is None else "&"
        return prefix + "&".join(p.pair() for p in self._output_params())

    def curl_command(self) -> str:
        """Shell command which would send the signed request with curl."""
        header = self.authorization_header()
        parts = ["curl", "--request", shlex.quote(self._get("http_method"))]
        if self._request_params:
            data = "&".join(p.pair() for p in self._request_params)
            parts += ["--data", shlex.quote(data)]
        parts += ["--header", shlex.quote(f"Authorization: {header}")]
        parts.append(shlex.quote(self._get("base_url")))
        return " ".join(parts)

    def destroy(self):
        """Forget all credentials and request data held by this signer."""
        self._reset()


def create_signer(**kwargs) -> Signer:
    return Signer(**kwargs)


def get_authorization_header(signer: Signer) -> str:
    return signer.authorization_header()


def get_query_suffix(signer: Signer) -> str:
    return signer.query_suffix()


def get_signature_base(signer: Signer) -> str:
    return signer.signature_base()


def get_curl_command(signer: Signer) -> str:
    return signer.curl_command()


# Name under which the command renderer is commonly known
get_cURL_command = get_curl_command


def destroy(signer: Signer):
    signer.destroy()
