"""Authentication backend base module."""

from abc import ABC, abstractmethod


class BaseAuthentication(ABC):
    """Base class for all GetResponse authentication backends."""

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """
        Return the headers authenticating a request.

        Returns:
            dict: Headers merged into every outbound request

        """
