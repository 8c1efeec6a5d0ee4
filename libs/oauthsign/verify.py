"""
OAuth 1.0 signature validation (RFC 5849 §3.2).
Supports the HMAC-SHA1 signature method, with the protocol parameters
sent either in the Authorization header or in the query string.
"""

import hmac
import logging
from urllib.parse import unquote, parse_qsl
from typing import Dict, List, Optional, Tuple

from .encoding import BYTE_ERRORS
from .params import Parameter, SIGNATURE_METHOD, OAUTH_VERSION, query_params, canonicalize
from .signer import AUTHORIZATION_SCHEME, signature_base_string, signing_key, sign_hmac_sha1

logger = logging.getLogger("oauthsign.verify")

REQUIRED_OAUTH_PARAMS = (
    'oauth_consumer_key',
    'oauth_signature_method',
    'oauth_timestamp',
    'oauth_nonce')


def parse_authorization_header(auth_header: str) -> Dict[str, str]:
    """Protocol parameters of an `OAuth` Authorization header, keyed by their
    decoded names. Raises ValueError for any other scheme."""
    prefix = AUTHORIZATION_SCHEME + ' '
    if not auth_header.startswith(prefix):
        raise ValueError("Not an OAuth authorization header")

    params = {}
    for param in auth_header[len(prefix):].split(','):
        param = param.strip()
        if '=' in param:
            key, value = param.split('=', 1)
            params[unquote(key, errors=BYTE_ERRORS)] = unquote(value.strip('"'), errors=BYTE_ERRORS)
    return params


def parse_query_oauth_params(url: str) -> Dict[str, str]:
    """Protocol parameters which were sent in the query string."""
    return {p.name: p.value for p in query_params(url) if p.name.startswith('oauth_')}


def parse_form_body(body: str) -> List[Tuple[str, str]]:
    """Body parameters of an application/x-www-form-urlencoded request."""
    if not body:
        return []
    return parse_qsl(body, keep_blank_values=True, errors=BYTE_ERRORS)


def expected_signature(*,
                       method: str,
                       url: str,
                       oauth_params: Dict[str, str],
                       body_params: List[Tuple[str, str]],
                       consumer_secret: str,
                       token_secret: str = "") -> str:
    """Recompute the signature a client should have sent. Only
    `oauth_signature` itself (and `realm`) is left out of the base string."""
    query = [p for p in query_params(url) if p.name != 'oauth_signature']
    protocol = [Parameter.create(k, v) for k, v in oauth_params.items()
                if k not in ('oauth_signature', 'realm')]
    body = [Parameter.create(k, v) for k, v in body_params]
    base_string = signature_base_string(method, url, canonicalize(query, body, protocol))
    return sign_hmac_sha1(base_string, signing_key(consumer_secret, token_secret))


def check_protocol_params(oauth_params: Dict[str, str]) -> bool:
    """True if the protocol parameters are complete and supported."""
    if not oauth_params.get('oauth_signature'):
        logger.warning("Rejecting request: no oauth_signature")
        return False

    missing = [key for key in REQUIRED_OAUTH_PARAMS if key not in oauth_params]
    if missing:
        logger.warning(f"Rejecting request: missing {missing}")
        return False

    if oauth_params['oauth_signature_method'] != SIGNATURE_METHOD:
        logger.warning(f"Rejecting request: unsupported method {oauth_params['oauth_signature_method']}")
        return False

    if oauth_params.get('oauth_version', OAUTH_VERSION) != OAUTH_VERSION:
        logger.warning(f"Rejecting request: unsupported version {oauth_params['oauth_version']}")
        return False
    return True


def signature_matches(provided: str, expected: str) -> bool:
    if hmac.compare_digest(provided.encode('utf-8'), expected.encode('utf-8')):
        return True
    logger.warning("Rejecting request: signature mismatch")
    return False


def validate_oauth1_signature(
    method: str,
    url: str,
    auth_header: str,
    body: str,
    consumer_secret: str,
    token_secret: str = ""
) -> Optional[str]:
    """
    Validate OAuth 1.0 signature from Authorization header.

    Returns:
        consumer_key if valid, None if invalid
    """
    try:
        oauth_params = parse_authorization_header(auth_header)
    except ValueError as e:
        logger.warning(f"Rejecting request: {e}")
        return None

    if not check_protocol_params(oauth_params):
        return None

    expected = expected_signature(
        method=method,
        url=url,
        oauth_params=oauth_params,
        body_params=parse_form_body(body),
        consumer_secret=consumer_secret,
        token_secret=token_secret)

    if signature_matches(oauth_params['oauth_signature'], expected):
        return oauth_params['oauth_consumer_key']
    return None


def validate_oauth1_query_signature(
    method: str,
    url: str,
    body: str,
    consumer_secret: str,
    token_secret: str = ""
) -> Optional[str]:
    """
    Validate OAuth 1.0 signature sent as query-string parameters.

    Returns:
        consumer_key if valid, None if invalid
    """
    oauth_params = parse_query_oauth_params(url)
    if not check_protocol_params(oauth_params):
        return None

    # The protocol parameters are part of the query already
    expected = expected_signature(
        method=method,
        url=url,
        oauth_params={},
        body_params=parse_form_body(body),
        consumer_secret=consumer_secret,
        token_secret=token_secret)

    if signature_matches(oauth_params['oauth_signature'], expected):
        return oauth_params['oauth_consumer_key']
    return None
