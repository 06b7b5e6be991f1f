#! /usr/bin/env python
"""jCal (RFC 7265) value support"""

import json
import logging

from .params import ICalDataType, ICalParameters


class JCalError(ValueError):

    """Raised when a jCal structure is malformed"""
    pass


class JCalValue(object):

    """A jCal property value

    data_type
        An :class:`params.ICalDataType` constant or None if the data
        type declared in the jCal was not recognised ('unknown').

    values
        A list of the property's values.  The values of a multi-valued
        property are strings for the data types handled here."""

    def __init__(self, data_type, values=()):
        self.data_type = data_type
        self.values = list(values)

    @classmethod
    def multi(cls, data_type, *values):
        return cls(data_type, values)

    def get_data_type(self):
        return self.data_type

    def get_multivalued(self):
        """Returns the values as a list of strings

        Raises :class:`JCalError` if any value is not a string."""
        for value in self.values:
            if not isinstance(value, str):
                raise JCalError("Expected string value in jCal, found %s" %
                                repr(value))
        return list(self.values)

    def get_type_name(self):
        if self.data_type is None:
            return "unknown"
        return ICalDataType.to_str_lower(self.data_type)

    def __eq__(self, other):
        if not isinstance(other, JCalValue):
            return NotImplemented
        return (self.data_type == other.data_type and
                self.values == other.values)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "JCalValue(%s, %s)" % (repr(self.get_type_name()),
                                      repr(self.values))


def decode_data_type(name):
    """Returns the :class:`params.ICalDataType` for a jCal type name

    Returns None for 'unknown' or any unrecognised name."""
    try:
        return ICalDataType.from_str_upper(name)
    except ValueError:
        logging.debug("Unrecognised jCal data type: %s", name)
        return None


def read_property(array):
    """Reads a jCal property array

    array
        A list of the form [name, {parameters}, type, value, ...] as
        loaded from JSON

    Returns a tuple of (name, :class:`params.ICalParameters`,
    :class:`JCalValue`).  Parameter names are upper-cased, multi-valued
    parameters (JSON arrays) contribute each of their values.  Raises
    :class:`JCalError` if a parameter value is not a string."""
    if not isinstance(array, list) or len(array) < 3:
        raise JCalError("jCal property must be an array of at least "
                        "three items: %s" % repr(array))
    name, params, type_name = array[0:3]
    if not isinstance(name, str) or not isinstance(params, dict) or \
            not isinstance(type_name, str):
        raise JCalError("Malformed jCal property: %s" % repr(array))
    parameters = ICalParameters()
    for pname, pvalue in params.items():
        if not isinstance(pvalue, list):
            pvalue = [pvalue]
        for value in pvalue:
            if not isinstance(value, str):
                raise JCalError("Expected string value for jCal parameter "
                                "%s, found %s" % (pname, repr(value)))
        parameters.put_all(pname, pvalue)
    return (name.upper(), parameters,
            JCalValue(decode_data_type(type_name), array[3:]))


def write_property(name, parameters, value):
    """Creates a jCal property array

    The inverse of :func:`read_property`.  Names are written in lower
    case, parameters with a single value are written as strings and the
    VALUE parameter is omitted as it is carried by the type name."""
    params = {}
    for pname, pvalues in parameters.items():
        if pname == ICalParameters.VALUE:
            continue
        if len(pvalues) == 1:
            params[pname.lower()] = pvalues[0]
        else:
            params[pname.lower()] = pvalues
    return [name.lower(), params, value.get_type_name()] + list(value.values)


def loads(src):
    """Reads a jCal property from a JSON string"""
    try:
        array = json.loads(src)
    except ValueError as err:
        raise JCalError(str(err))
    return read_property(array)


def dumps(name, parameters, value):
    """Writes a jCal property to a JSON string"""
    return json.dumps(write_property(name, parameters, value))
