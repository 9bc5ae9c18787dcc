"""GetResponse workflow node module."""

from django.utils.functional import LazyObject

from .handler import ClientHandler


class DefaultClient(LazyObject):
    """Lazy object to handle the GetResponse client."""

    def _setup(self):
        """Configure the GetResponse client."""
        self._wrapped = client_handler()


client_handler = ClientHandler()
default_client = DefaultClient()
