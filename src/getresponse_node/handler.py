"""GetResponse client handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from getresponse_node.client import GetResponseClient
from getresponse_node.exceptions import InvalidAuthenticationError

DEFAULT_AUTHENTICATION = "apiKey"


class ClientHandler:
    """Client handler managing the authentication backends and client instantiation."""

    def __init__(self, config=None):
        """Initialize the client handler."""
        # config is an optional dict structured like settings.GETRESPONSE_NODE.
        self._config = config
        self._clients = {}

    @cached_property
    def config(self):
        """Put in cache the client configuration from the settings."""
        if self._config is None:
            try:
                self._config = settings.GETRESPONSE_NODE.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.GETRESPONSE_NODE is not configured") from e
        return self._config

    def __call__(self, authentication=None):
        """Create if not existing the client of an authentication method and then return it."""
        authentication = authentication or DEFAULT_AUTHENTICATION
        if authentication not in self._clients:
            self._clients[authentication] = self.create_client(self.config, authentication)
        return self._clients[authentication]

    def get_authentication_config(self, config, authentication):
        """
        Return the backend configuration of an authentication method.

        AUTHENTICATION is either a single backend configuration used for every
        method, or a mapping of method names ("apiKey", "oAuth2") to backend
        configurations.
        """
        try:
            backends = config["AUTHENTICATION"]
        except KeyError as e:
            raise ImproperlyConfigured("settings.GETRESPONSE_NODE has no AUTHENTICATION backend") from e
        if "BACKEND" in backends:
            return backends
        try:
            return backends[authentication]
        except KeyError as e:
            raise ImproperlyConfigured(
                f"settings.GETRESPONSE_NODE has no AUTHENTICATION backend for {authentication!r}"
            ) from e

    def create_authentication(self, params):
        """Instantiate and configure the authentication backend."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise InvalidAuthenticationError(f"Could not find authentication backend {backend!r}: {e}") from e
        return klass(**parameters)

    def create_client(self, config, authentication=DEFAULT_AUTHENTICATION):
        """Instantiate the client with the backend of an authentication method."""
        backend = self.create_authentication(self.get_authentication_config(config, authentication))
        return GetResponseClient(backend, **config.get("PARAMETERS", {}))
