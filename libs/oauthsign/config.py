"""
OAuth 1.0 credentials from a YAML settings file.

The file holds a list of entries, each scoped to a URL pattern:

    - scope: https://api.twitter.com/*
      oauth1:
        consumerKey: xvz1evFS4wEEPTGEFPHBog
        consumerSecret: kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw
        token: 370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb
        tokenSecret: LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE
      showSignatureBase: false

The first entry whose scope matches the request URL wins.
"""

import os
import fnmatch
import logging
import dataclasses as dc
from typing import List, Optional

import yaml

from .errors import OAuthSignError

logger = logging.getLogger("oauthsign.config")

SETTINGS_FILE_ENV = "OAUTH_SIGN_SETTINGS_FILE"


class SettingsError(OAuthSignError):
    """Raised if the settings file is malformed."""
    def __init__(self, path: str, what: str):
        super(SettingsError, self).__init__(f"Invalid settings in {path}: {what}")
        self.path = path


@dc.dataclass
class Credentials:
    consumer_key: str
    consumer_secret: str
    token: str = ""
    token_secret: str = ""


@dc.dataclass
class ScopeSettings:
    scope: str
    credentials: Credentials
    show_signature_base: bool = False

    def matches(self, url: str) -> bool:
        return fnmatch.fnmatchcase(url, self.scope)


class Settings:

    def __init__(self, entries: Optional[List[ScopeSettings]] = None, path: str = "<none>"):
        self.entries: List[ScopeSettings] = entries or []
        self.path = path

    @classmethod
    def parse(cls, content: str, path: str = "<string>") -> "Settings":
        data = yaml.safe_load(content) or []
        if not isinstance(data, list):
            raise SettingsError(path, "expected a list of scope entries")
        entries = []
        for i, entry in enumerate(data):
            if not isinstance(entry, dict) or "scope" not in entry:
                raise SettingsError(path, f"entry #{i} has no `scope`")
            oauth1 = entry.get("oauth1")
            if not isinstance(oauth1, dict):
                raise SettingsError(path, f"entry #{i} has no `oauth1` block")
            for key in ("consumerKey", "consumerSecret"):
                if key not in oauth1:
                    raise SettingsError(path, f"entry #{i} is missing `oauth1.{key}`")
            entries.append(ScopeSettings(
                scope=str(entry["scope"]),
                credentials=Credentials(
                    consumer_key=str(oauth1["consumerKey"]),
                    consumer_secret=str(oauth1["consumerSecret"]),
                    token=str(oauth1.get("token", "")),
                    token_secret=str(oauth1.get("tokenSecret", ""))),
                show_signature_base=bool(entry.get("showSignatureBase", False))))
        return cls(entries, path)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Settings":
        """Read settings from `path`, or from the file named by
        $OAUTH_SIGN_SETTINGS_FILE. No file means no settings."""
        path = path or os.environ.get(SETTINGS_FILE_ENV)
        if not path:
            return cls()
        logger.debug(f"Loading settings from {path}")
        with open(path, "r", encoding="utf-8") as settings_file:
            return cls.parse(settings_file.read(), path)

    def for_url(self, url: str) -> Optional[ScopeSettings]:
        for entry in self.entries:
            if entry.matches(url):
                return entry
        return None
