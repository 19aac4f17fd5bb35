"""
Carrier access used by the propagators.

A carrier is whatever object holds the text headers of a request. The
propagators never touch it directly; they go through a Getter when
extracting and a Setter when injecting.
"""
from abc import ABCMeta, abstractmethod


class Getter(metaclass=ABCMeta):
    """Reads header values out of a carrier."""

    @abstractmethod
    def get(self, carrier, key):
        """
        :param carrier: the object holding the headers
        :param str key: the header name
        :return: None, a string, or a list of strings when the transport
            allows a header to be repeated
        """

    @abstractmethod
    def keys(self, carrier):
        """Return the names of every header held by carrier."""


class Setter(metaclass=ABCMeta):
    """Writes header values into a carrier."""

    @abstractmethod
    def set(self, carrier, key, value):
        """Store value under the header named key."""


class DictGetter(Getter):

    def get(self, carrier, key):
        return carrier.get(key)

    def keys(self, carrier):
        return list(carrier.keys())


class DictSetter(Setter):

    def set(self, carrier, key, value):
        carrier[key] = value


default_getter = DictGetter()
default_setter = DictSetter()
