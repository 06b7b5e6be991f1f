#! /usr/bin/env python
"""iCalendar property parameters"""

import logging

from .enumeration import Enumeration


class ParameterError(ValueError):

    """Raised when a parameter value is malformed

    This is a caller contract error, it is raised when an accessor is
    asked to interpret a value that can't be interpreted.  Use
    :meth:`ICalParameters.validate` to discover such values in advance."""
    pass


class ICalDataType(Enumeration):

    """Value data types, as used in the VALUE parameter

    Hyphenated names are available as attributes with underscores::

        ICalDataType.DATE_TIME == ICalDataType.decode['DATE-TIME']"""

    decode = {
        'BINARY': 1,
        'BOOLEAN': 2,
        'CAL-ADDRESS': 3,
        'DATE': 4,
        'DATE-TIME': 5,
        'DURATION': 6,
        'FLOAT': 7,
        'INTEGER': 8,
        'PERIOD': 9,
        'RECUR': 10,
        'TEXT': 11,
        'TIME': 12,
        'URI': 13,
        'UTC-OFFSET': 14
    }

    aliases = {
        'CAL_ADDRESS': 'CAL-ADDRESS',
        'DATE_TIME': 'DATE-TIME',
        'UTC_OFFSET': 'UTC-OFFSET'
    }


class CalendarUserType(Enumeration):

    decode = {
        'INDIVIDUAL': 1,
        'GROUP': 2,
        'RESOURCE': 3,
        'ROOM': 4,
        'UNKNOWN': 5
    }


class FreeBusyType(Enumeration):

    decode = {
        'FREE': 1,
        'BUSY': 2,
        'BUSY-UNAVAILABLE': 3,
        'BUSY-TENTATIVE': 4
    }

    aliases = {
        'BUSY_UNAVAILABLE': 'BUSY-UNAVAILABLE',
        'BUSY_TENTATIVE': 'BUSY-TENTATIVE'
    }


class ParticipationStatus(Enumeration):

    decode = {
        'NEEDS-ACTION': 1,
        'ACCEPTED': 2,
        'DECLINED': 3,
        'TENTATIVE': 4,
        'DELEGATED': 5,
        'COMPLETED': 6,
        'IN-PROCESS': 7
    }

    aliases = {
        'NEEDS_ACTION': 'NEEDS-ACTION',
        'IN_PROCESS': 'IN-PROCESS'
    }


class Range(Enumeration):

    decode = {
        'THISANDFUTURE': 1,
        'THISANDPRIOR': 2
    }


class Related(Enumeration):

    decode = {
        'START': 1,
        'END': 2
    }


class RelationshipType(Enumeration):

    decode = {
        'PARENT': 1,
        'CHILD': 2,
        'SIBLING': 3
    }


class Role(Enumeration):

    decode = {
        'CHAIR': 1,
        'REQ-PARTICIPANT': 2,
        'OPT-PARTICIPANT': 3,
        'NON-PARTICIPANT': 4
    }

    aliases = {
        'REQ_PARTICIPANT': 'REQ-PARTICIPANT',
        'OPT_PARTICIPANT': 'OPT-PARTICIPANT',
        'NON_PARTICIPANT': 'NON-PARTICIPANT'
    }


class ICalParameters(object):

    """A property's parameters

    A mapping from parameter name to an ordered list of string values.
    Names are case insensitive: they are converted to upper case on
    insertion and lookup.  The order in which values are added to each
    name is preserved, as is the order in which names are first
    added."""

    CN = "CN"
    CUTYPE = "CUTYPE"
    DELEGATED_FROM = "DELEGATED-FROM"
    DELEGATED_TO = "DELEGATED-TO"
    DIR = "DIR"
    ENCODING = "ENCODING"
    FBTYPE = "FBTYPE"
    FMTTYPE = "FMTTYPE"
    LANGUAGE = "LANGUAGE"
    MEMBER = "MEMBER"
    PARTSTAT = "PARTSTAT"
    RANGE = "RANGE"
    RELATED = "RELATED"
    RELTYPE = "RELTYPE"
    ROLE = "ROLE"
    RSVP = "RSVP"
    SENT_BY = "SENT-BY"
    TZID = "TZID"
    VALUE = "VALUE"

    #: parameters whose values must be taken from an enumeration
    enumerated = {
        CUTYPE: CalendarUserType,
        FBTYPE: FreeBusyType,
        PARTSTAT: ParticipationStatus,
        RANGE: Range,
        RELATED: Related,
        RELTYPE: RelationshipType,
        ROLE: Role,
        VALUE: ICalDataType
    }

    def __init__(self, parameters=None):
        self._map = {}
        if parameters is not None:
            if isinstance(parameters, ICalParameters):
                parameters = parameters.items()
            elif isinstance(parameters, dict):
                parameters = parameters.items()
            for name, value in parameters:
                if isinstance(value, (list, tuple)):
                    self.put_all(name, value)
                else:
                    self.put(name, value)

    @staticmethod
    def sanitize_key(name):
        return name.upper()

    def put(self, name, value):
        """Adds *value* to the values of parameter *name*"""
        self._map.setdefault(self.sanitize_key(name), []).append(value)

    def put_all(self, name, values):
        """Adds each of *values* to the values of parameter *name*"""
        values = list(values)
        if values:
            self._map.setdefault(self.sanitize_key(name), []).extend(values)

    def replace(self, name, value):
        """Replaces all values of *name* with the single *value*

        Returns the list of values that were removed."""
        key = self.sanitize_key(name)
        old_values = self._map.pop(key, [])
        self._map[key] = [value]
        return old_values

    def first(self, name):
        """Returns the first value of *name* or None"""
        values = self._map.get(self.sanitize_key(name))
        if values:
            return values[0]
        else:
            return None

    def get(self, name):
        """Returns a (new) list of the values of *name*

        The list is empty if the parameter is not present."""
        return list(self._map.get(self.sanitize_key(name), ()))

    def remove(self, name, value):
        """Removes the first instance of *value* from *name*

        Returns True if the value was found and removed."""
        key = self.sanitize_key(name)
        values = self._map.get(key)
        if not values or value not in values:
            return False
        values.remove(value)
        if not values:
            del self._map[key]
        return True

    def remove_all(self, name):
        """Removes all values of *name*, returning them as a list"""
        return self._map.pop(self.sanitize_key(name), [])

    def clear(self):
        self._map.clear()

    def copy(self):
        return ICalParameters(self)

    def keys(self):
        return list(self._map.keys())

    def items(self):
        """Returns a list of (name, list of values) tuples"""
        return [(k, list(v)) for k, v in self._map.items()]

    def __contains__(self, name):
        return self.sanitize_key(name) in self._map

    def __len__(self):
        return len(self._map)

    def __iter__(self):
        return iter(self.keys())

    def __eq__(self, other):
        if not isinstance(other, ICalParameters):
            return NotImplemented
        return self._map == other._map

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "ICalParameters(%s)" % repr(self.items())

    def get_value(self):
        """Returns the VALUE parameter

        The result is an :class:`ICalDataType` constant or None if
        there is no VALUE parameter or it does not name a known data
        type."""
        value = self.first(self.VALUE)
        if value is None:
            return None
        try:
            return ICalDataType.from_str_upper(value)
        except ValueError:
            logging.debug("Unknown VALUE parameter: %s", value)
            return None

    def set_value(self, data_type):
        """Sets the VALUE parameter

        data_type
            An :class:`ICalDataType` constant or None to remove the
            parameter."""
        if data_type is None:
            self.remove_all(self.VALUE)
        else:
            self.replace(self.VALUE, ICalDataType.to_str(data_type))

    def get_tzid(self):
        return self.first(self.TZID)

    def set_tzid(self, tzid):
        if tzid is None:
            self.remove_all(self.TZID)
        else:
            self.replace(self.TZID, tzid)

    def get_rsvp(self):
        """Returns the RSVP parameter

        Returns True or False if the parameter is present and valid, or
        None if it is absent.  If the value is present but is neither
        TRUE nor FALSE (in any case) :class:`ParameterError` is
        raised."""
        value = self.first(self.RSVP)
        if value is None:
            return None
        value = value.upper()
        if value == "TRUE":
            return True
        elif value == "FALSE":
            return False
        raise ParameterError("RSVP parameter value is malformed: %s" %
                             repr(value))

    def set_rsvp(self, rsvp):
        """Sets the RSVP parameter from True, False or None (removes)"""
        if rsvp is None:
            self.remove_all(self.RSVP)
        else:
            self.replace(self.RSVP, "TRUE" if rsvp else "FALSE")

    def validate(self):
        """Checks the values of the parameters

        Returns a list of warning strings, one for each malformed RSVP
        value and each value of an enumerated parameter that is not a
        member of its enumeration."""
        warnings = []
        for value in self.get(self.RSVP):
            if value.upper() not in ("TRUE", "FALSE"):
                warnings.append("%s parameter value is malformed: %s" %
                                (self.RSVP, value))
        for name, enum in self.enumerated.items():
            for value in self.get(name):
                try:
                    enum.from_str_upper(value)
                except ValueError:
                    warnings.append("%s parameter value is invalid: %s" %
                                    (name, value))
        return warnings
