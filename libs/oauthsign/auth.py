import logging
from typing import List, Optional, Tuple
from urllib.parse import parse_qsl

from requests.auth import AuthBase

from .config import Settings, SettingsError
from .encoding import BYTE_ERRORS
from .signer import Signer

logger = logging.getLogger("oauthsign.auth")

CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"


class OAuth1Auth(AuthBase):
    """
    Brief

        Signs outgoing `requests` requests with OAuth 1.0 HMAC-SHA1.
        Query parameters of the URL and form-encoded body parameters are
        part of the signature. The result is put into the `Authorization`
        header, or appended to the URL if `query_mode` is set.

    Example

        import requests
        from oauthsign import OAuth1Auth
        auth = OAuth1Auth("key", "secret", "token", "token-secret")
        requests.post("https://api.twitter.com/1/statuses/update.json",
                      data={"status": "Hello"}, auth=auth)
    """

    def __init__(self,
                 consumer_key: str,
                 consumer_secret: str,
                 token: str = "",
                 token_secret: str = "",
                 *,
                 query_mode: bool = False,
                 **signer_kwargs):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.token = token
        self.token_secret = token_secret
        self.query_mode = query_mode
        self.signer_kwargs = signer_kwargs

    @classmethod
    def from_settings(cls, url: str, settings: Optional[Settings] = None, **kwargs) -> "OAuth1Auth":
        """Use the credentials of the settings entry whose scope matches `url`."""
        settings = settings or Settings.load()
        entry = settings.for_url(url)
        if not entry:
            raise SettingsError(settings.path, f"no scope matches {url}")
        kwargs.setdefault("show_signature_base", entry.show_signature_base)
        creds = entry.credentials
        return cls(creds.consumer_key, creds.consumer_secret, creds.token, creds.token_secret, **kwargs)

    def signer_for(self, r) -> Signer:
        """Fresh signer loaded with the credentials and the parts of `r`."""
        signer = Signer(**self.signer_kwargs)
        signer.set_consumer_key(self.consumer_key)
        signer.set_consumer_secret(self.consumer_secret)
        signer.set_token(self.token)
        signer.set_token_secret(self.token_secret)
        signer.set_http_method(r.method)
        # Fragments are never sent, so they are not signed either
        signer.set_base_url(r.url.partition("#")[0])
        signer.set_request_params(form_params(r))
        return signer

    def __call__(self, r):
        signer = self.signer_for(r)
        if self.query_mode:
            # The suffix goes in front of a fragment, which stays last
            url, hash_mark, fragment = r.url.partition("#")
            r.url = url + signer.query_suffix() + hash_mark + fragment
        else:
            r.headers["Authorization"] = signer.authorization_header()
        logger.debug(f"Signed {r.method} request for consumer {self.consumer_key}")
        return r


def form_params(r) -> List[Tuple[str, str]]:
    """Parameters of a form-encoded request body, empty for any other body."""
    content_type = r.headers.get("Content-Type", "")
    if CONTENT_TYPE_FORM_URLENCODED not in content_type or not r.body:
        return []
    body = r.body
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors=BYTE_ERRORS)
    if not isinstance(body, str):
        return []
    return parse_qsl(body, keep_blank_values=True, errors=BYTE_ERRORS)
