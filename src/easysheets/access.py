import base64
import binascii
import copy
import json
import logging
from collections.abc import Iterable

from google.auth.transport.requests import Request
from google.oauth2 import service_account
from googleapiclient.discovery import build, Resource

logger = logging.getLogger(__name__)

class CredentialsError(ValueError):
    """The supplied service account key could not be decoded."""
    pass

class ServiceAccountAccess():
    """
    Class encapsulating authenticated access to Google Sheets with a service account.
    The service account key (the JSON file Google hands out when you create a key)
    is supplied base64 encoded, which is the convenient form for stuffing it in an
    environment variable or a CI secret.

    Nothing talks to Google until a service is requested.  The first get_service()
    builds the credentials, fetches an access token and builds the discovery client,
    after that the same client is handed back.
    """

    __SCOPES = {
        "feeds": "https://spreadsheets.google.com/feeds",
        "sheets": "https://www.googleapis.com/auth/spreadsheets",
        "sheets-ro": "https://www.googleapis.com/auth/spreadsheets.readonly",
        "drive-file": "https://www.googleapis.com/auth/drive.file",
        "drive": "https://www.googleapis.com/auth/drive",
        "drive-ro": "https://www.googleapis.com/auth/drive.readonly",
    }
    __SCOPE_URL_PREFIXES = ("https://www.googleapis.com/", "https://spreadsheets.google.com/")
    __REQUIRED_KEYS = ("client_email", "private_key")

    DEFAULT_SCOPES = ["feeds"]

    def __init__(self, creds64: str, scopes: None|list[str]|str = None) -> None:
        self.__info = self.decode_credentials(creds64)
        self.reset()
        if scopes is not None:
            self.scopes = scopes

    def __bool__(self) -> bool:
        """True is we are connected and authenticated"""
        return self.connected

    def __str__(self) -> str:
        state = "Connected" if self.connected else "Disconnected"
        return f"{state}:{self.client_email}:{str(self.__scopes)}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Get a scope based on simplified label.
        A raw URL will also be expected.
        """
        s = str(scope)
        sc = cls.__SCOPES.get(s, "")
        if not sc and s.startswith(cls.__SCOPE_URL_PREFIXES):
            sc = s
        return sc

    @classmethod
    def decode_credentials(cls, creds64: str|bytes) -> dict:
        """
        Turn the base64 encoded service account key into the info dict
        google.oauth2 wants.  Whitespace is ignored so line wrapped output
        from the base64 tool decodes too.
        """
        if not isinstance(creds64, (str, bytes)):
            raise CredentialsError(f"Service account credentials must be a base64 string, not {type(creds64).__name__}")
        try:
            raw = base64.b64decode(creds64[:0].join(creds64.split()), validate=True)
            info = json.loads(raw.decode("utf-8"))
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CredentialsError(f"Service account credentials are not base64 encoded JSON: {e}") from e
        if not isinstance(info, dict):
            raise CredentialsError("Service account credentials must decode to a JSON object")
        missing = [k for k in cls.__REQUIRED_KEYS if not info.get(k)]
        if missing:
            raise CredentialsError(f"Service account credentials missing: {', '.join(missing)}")
        return info

    @property
    def client_email(self) -> str:
        return self.__info["client_email"]

    @property
    def info(self) -> dict:
        """A copy of the decoded service account key."""
        return copy.deepcopy(self.__info)

    @property
    def connected(self) -> bool:
        """
        Are we authenticated with Google?
        """
        return bool(self.__creds) and bool(self.__creds.valid)

    @property
    def services(self) -> dict[str,Resource]:
        """
        Current active services.  Can be empty.
        """
        return self.__services

    @property
    def scopes(self) -> list[str]:
        """
        The scopes requested or to be requested on next authentication.
        """
        return self.__scopes

    @scopes.setter
    def scopes(self, value: None|list[str]|str) -> None:
        """
        Override the list of scopes.  Unknown labels are dropped.
        Any existing session was granted for the old scopes so it goes.
        """
        slist = []
        if value is not None:
            vals = [value] if isinstance(value, str) or not isinstance(value, Iterable) else value
            for v in vals:
                s = self.get_scope(str(v))
                if s and s not in slist:
                    slist.append(s)
        if not slist:
            raise ValueError(f"No valid scopes in: {value}")
        self.__scopes = slist
        self.clear()

    @property
    def config(self) -> dict:
        """
        Get the configuration state as a dict.
        The key itself is not included, only who it belongs to.
        """
        return {
            'client_email': self.client_email,
            'scopes': list(self.__scopes),
            'cache_discovery': self.cache_discovery
        }

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict.
        Convenience method for inserting state pulled from a config file or equivalent.
        """
        v = config.get('cache_discovery', None)
        if v is not None:
            self.cache_discovery = bool(v)
            self.__services = {}
        v = config.get('scopes', [])
        if v:
            self.scopes = v

    def clear(self) -> None:
        """Drop the session, keeping the configuration."""
        self.__creds = None
        self.__services = {}

    def reset(self) -> None:
        """
        Reset all connection state to defaults.
        """
        self.__scopes = [self.get_scope(s) for s in self.DEFAULT_SCOPES]
        self.cache_discovery = False
        self.clear()

    def connect(self) -> bool:
        """
        Establish a new authentication session.
        Builds the credentials from the key and refreshes them once, which is
        the point the token exchange actually happens.  Auth failures from
        Google (RefreshError) are left to the caller.
        """
        self.clear()
        creds = service_account.Credentials.from_service_account_info(
            self.__info, scopes=copy.copy(self.__scopes))
        logger.debug("authorizing %s for %s", self.client_email, self.__scopes)
        creds.refresh(Request())
        self.__creds = creds
        if self.connected:
            logger.info("authorized service account %s", self.client_email)
        return self.connected

    def get_service(self, name: str = "sheets", version: str = "v4") -> Resource:
        """
        Build the requested service if not already available, connecting if required.
        A built service refreshes its own token so it is kept for the life of this object.
        """
        id = f'{name}:{version}'
        s = self.__services.get(id, None)
        if s is None:
            if not self.connected:
                self.connect()
            logger.debug("building %s service", id)
            s = build(name, version, credentials=self.__creds,
                      cache_discovery=self.cache_discovery)
            self.__services[id] = s
        return s
