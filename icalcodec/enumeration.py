#! /usr/bin/env python
"""Enumerated constants for parameter values and data types"""

import logging


class EnumMetaClass(type):

    """Metaclass for :class:`Enumeration`

    Initialises the Enumeration immediately after the class is
    defined."""

    def __init__(self, name, bases, dct):
        super(EnumMetaClass, self).__init__(name, bases, dct)
        if hasattr(self, '_init_enum'):
            self._init_enum()


class Enumeration(object, metaclass=EnumMetaClass):

    """Abstract class for defining enumerations

    The class is not designed to be instantiated but to act as a method
    of defining constants to represent the values of an enumeration and
    for converting between those constants and the appropriate string
    representations.

    Derived classes define a single class member called 'decode' which
    is a mapping from canonical strings to simple integers.  Once
    defined, the class will be automatically populated with a reverse
    mapping dictionary (called encode) and the enumeration strings will
    be added as attributes of the class itself.  For example::

        class Related(Enumeration):
            decode = {
                'START': 1,
                'END': 2}

        Related.START == 1    # True thanks to metaclass

    Canonical strings that are not valid Python names can be given
    usable attribute names with a second dictionary called aliases that
    maps additional names onto existing canonical strings::

        class Role(Enumeration):
            decode = {
                'CHAIR': 1,
                'REQ-PARTICIPANT': 2}
            aliases = {
                'REQ_PARTICIPANT': 'REQ-PARTICIPANT'}

        Role.REQ_PARTICIPANT == 2       # True

    The special key None in aliases defines the DEFAULT attribute."""

    @classmethod
    def _init_enum(cls):
        if 'decode' not in cls.__dict__:
            # Skip initialisation for abstract classes
            return
        cls.decode = dict(cls.decode)
        cls.encode = dict((v, k) for k, v in cls.decode.items())
        aliases = getattr(cls, 'aliases', {})
        for k, v in aliases.items():
            if k is None:
                cls.DEFAULT = cls.decode[v]
            else:
                cls.decode[k] = cls.decode[v]
        for k, v in cls.decode.items():
            if k in cls.__dict__:
                logging.error("Illegal name for Enumeration: %s" % repr(k))
            else:
                setattr(cls, k, v)

    DEFAULT = None
    """The DEFAULT value of the enumeration defaults to None"""

    @classmethod
    def from_str(cls, src):
        """Decodes a string returning a value in this enumeration.

        If no legal value can be decoded then ValueError is raised."""
        try:
            src = src.strip()
            return cls.decode[src]
        except KeyError:
            raise ValueError("Can't decode %s from %s" % (cls.__name__, src))

    @classmethod
    def from_str_upper(cls, src):
        """Decodes a string, converting it to upper case first.

        Returns a value in this enumeration.  If no legal value can be
        decoded then ValueError is raised."""
        try:
            src = src.strip().upper()
            return cls.decode[src]
        except KeyError:
            raise ValueError("Can't decode %s from %s" % (cls.__name__, src))

    @classmethod
    def to_str(cls, value):
        """Returns the canonical string for *value*"""
        return cls.encode[value]

    @classmethod
    def to_str_lower(cls, value):
        """Returns the canonical string for *value* in lower case

        xCal element names and jCal type names use this form."""
        return cls.encode[value].lower()
