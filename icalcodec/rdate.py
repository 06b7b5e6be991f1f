#! /usr/bin/env python
"""The RDATE (recurrence dates) property

RDATE values are either a list of dates, a list of date-times or a list
of periods.  The :class:`RecurrenceDatesMarshaller` translates between
:class:`RecurrenceDates` instances and the plain text, xCal and jCal
representations.  Values that can't be parsed are skipped and reported
by appending a message to a warnings list supplied by the caller; the
remaining values are still parsed."""

import logging

from . import iso8601 as iso
from .grammar import join_list, split_list
from .jcal import JCalValue
from .params import ICalDataType, ICalParameters
from .values import DateList, Period, PeriodList


class RecurrenceDates(object):

    """An RDATE property

    value
        A :class:`values.DateList`, a :class:`values.PeriodList` or
        None for an empty property.

    parameters
        Optional :class:`params.ICalParameters` (or anything that can
        initialise one)."""

    name = "RDATE"

    def __init__(self, value=None, parameters=None):
        if value is not None and not isinstance(value,
                                                (DateList, PeriodList)):
            raise TypeError("RDATE value must be DateList or PeriodList: %s" %
                            repr(value))
        self.value = value
        self.parameters = ICalParameters(parameters)

    @classmethod
    def from_dates(cls, dates, has_time=True):
        """Creates a property from an iterable of dates or date-times"""
        return cls(DateList(dates, has_time))

    @classmethod
    def from_periods(cls, periods):
        """Creates a property from an iterable of :class:`values.Period`"""
        return cls(PeriodList(periods))

    @property
    def dates(self):
        """The :class:`values.DateList` or None"""
        if isinstance(self.value, DateList):
            return self.value
        return None

    @property
    def periods(self):
        """The :class:`values.PeriodList` or None"""
        if isinstance(self.value, PeriodList):
            return self.value
        return None

    @property
    def has_time(self):
        """The has_time flag of the date list

        None if this property does not contain a date list."""
        if isinstance(self.value, DateList):
            return self.value.has_time
        return None

    def is_empty(self):
        return not self.value

    def __eq__(self, other):
        if not isinstance(other, RecurrenceDates):
            return NotImplemented
        return (type(self.value) is type(other.value) and
                self.value == other.value)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "RecurrenceDates(%s)" % repr(self.value)


class RecurrenceDatesMarshaller(object):

    """Reads and writes :class:`RecurrenceDates` properties

    allow_missing_start
        Controls the handling of xCal periods without a <start>
        element.  By default such periods are accepted with a start of
        None.  If False, they are skipped with a warning."""

    property_name = RecurrenceDates.name

    def __init__(self, allow_missing_start=True):
        self.allow_missing_start = allow_missing_start

    def get_data_type(self, prop):
        """Returns the data type to declare when writing *prop*

        Returns ICalDataType.DATE for a list of dates,
        ICalDataType.PERIOD for a list of periods, otherwise None which
        means the default (DATE-TIME) applies."""
        if isinstance(prop.value, DateList):
            if not prop.value.has_time:
                return ICalDataType.DATE
        elif isinstance(prop.value, PeriodList):
            return ICalDataType.PERIOD
        return None

    def prepare_parameters(self, prop, parameters=None):
        """Returns the parameters to write with *prop*

        parameters
            The parameters to start from, defaults to those of prop.
            They are copied, not modified.

        The VALUE parameter of the result is set (or removed) to match
        the value of prop."""
        if parameters is None:
            parameters = prop.parameters
        result = ICalParameters(parameters)
        result.set_value(self.get_data_type(prop))
        return result

    def write_text(self, prop):
        """Returns the plain text value of *prop*

        Date-times and periods are written in the basic form, values
        are separated by commas.  An empty property is an empty
        string."""
        if isinstance(prop.value, DateList):
            has_time = prop.value.has_time
            return join_list(prop.value,
                             lambda d: iso.format_date(d.value, has_time))
        elif isinstance(prop.value, PeriodList):
            return join_list(prop.value, lambda p: p.get_string())
        return ""

    def parse_text(self, value, parameters=None, warnings=None):
        """Parses the plain text value of an RDATE property

        value
            The (unfolded) value part of the content line

        parameters
            The property's :class:`params.ICalParameters`, the VALUE
            parameter determines how values are interpreted (defaulting
            to DATE-TIME) and TZID localises date-times that have no
            zone designator.

        warnings
            A list to which a message is appended for each value that
            can't be parsed."""
        if parameters is None:
            parameters = ICalParameters()
        data_type = parameters.get_value()
        if data_type is None:
            data_type = ICalDataType.DATE_TIME
        return self._parse(split_list(value), data_type, parameters,
                           warnings)

    def write_xml(self, prop, element):
        """Writes the value of *prop* into the xCal *element*

        element
            The :class:`xcal.XCalElement` representing the property"""
        if isinstance(prop.value, DateList):
            has_time = prop.value.has_time
            if has_time:
                data_type = ICalDataType.DATE_TIME
            else:
                data_type = ICalDataType.DATE
            for d in prop.value:
                element.append(data_type,
                               iso.format_date(d.value, has_time, True))
        elif isinstance(prop.value, PeriodList):
            for period in prop.value:
                period_element = element.append(ICalDataType.PERIOD)
                if period.start is not None:
                    period_element.append(
                        "start", iso.format_date(period.start, True, True))
                if period.end is not None:
                    period_element.append(
                        "end", iso.format_date(period.end, True, True))
                if period.duration is not None:
                    period_element.append("duration", str(period.duration))

    def parse_xml(self, element, parameters=None, warnings=None):
        """Parses the value of an xCal RDATE property

        element
            The :class:`xcal.XCalElement` representing the property

        parameters
            The property's :class:`params.ICalParameters`, defaults to
            the parameters read from the element itself.

        The shape of the value is determined by the child elements.  If
        there are <period> children the result is a list of periods,
        otherwise <date-time> and <date> children are read (in that
        order) into a single list which has time if there is at least
        one <date-time>."""
        if warnings is None:
            warnings = []
        if parameters is None:
            parameters = element.parameters()
        tzid = parameters.get_tzid()
        period_elements = element.children(ICalDataType.PERIOD)
        if period_elements:
            periods = PeriodList()
            for period_element in period_elements:
                period = self._parse_xml_period(period_element, tzid,
                                                warnings)
                if period is not None:
                    periods.append(period)
            return RecurrenceDates(periods)
        date_strs = element.all(ICalDataType.DATE_TIME)
        has_time = len(date_strs) > 0
        date_strs = date_strs + element.all(ICalDataType.DATE)
        dates = DateList(has_time=has_time)
        for date_str in date_strs:
            d = iso.parse_date(date_str, tzid)
            if d is None:
                self._warn(warnings, "Skipping unparsable date: %s" %
                           date_str)
                continue
            dates.append(iso.ICalDate(d.value, has_time))
        return RecurrenceDates(dates)

    def _parse_xml_period(self, period_element, tzid, warnings):
        start = None
        start_str = period_element.first("start")
        end_str = period_element.first("end")
        duration_str = period_element.first("duration")
        if start_str is not None:
            start = iso.parse_date(start_str, tzid)
            if start is None:
                self._warn(warnings,
                           "Could not parse start date, skipping time "
                           "period: %s" % start_str)
                return None
            start = start.value
        elif not self.allow_missing_start:
            if end_str is not None:
                raw = end_str
            else:
                raw = duration_str or ''
            self._warn(warnings,
                       "No start date found, skipping time period: %s" % raw)
            return None
        if end_str is not None:
            end = iso.parse_date(end_str, tzid)
            if end is None:
                self._warn(warnings,
                           "Could not parse end date, skipping time "
                           "period: %s" % end_str)
                return None
            return Period(start, end=end.value)
        if duration_str is not None:
            duration = iso.parse_duration(duration_str)
            if duration is None:
                self._warn(warnings,
                           "Could not parse duration, skipping time "
                           "period: %s" % duration_str)
                return None
            return Period(start, duration=duration)
        # neither end nor duration: not a period
        logging.debug("RDATE: ignoring <period> with no <end> or <duration>")
        return None

    def write_json(self, prop, extended=False):
        """Returns the jCal value of *prop* as a :class:`jcal.JCalValue`

        The data type is DATE, PERIOD or (otherwise) DATE-TIME.  Values
        are written in the basic form unless *extended* is True."""
        data_type = self.get_data_type(prop)
        if data_type is None:
            data_type = ICalDataType.DATE_TIME
        if isinstance(prop.value, DateList):
            has_time = prop.value.has_time
            values = [iso.format_date(d.value, has_time, extended)
                      for d in prop.value]
        elif isinstance(prop.value, PeriodList):
            values = [p.get_string(extended) for p in prop.value]
        else:
            values = []
        return JCalValue(data_type, values)

    def parse_json(self, value, parameters=None, warnings=None):
        """Parses the value of a jCal RDATE property

        value
            A :class:`jcal.JCalValue`, its data type determines how the
            values are interpreted (defaulting to DATE-TIME if it is
            unknown)."""
        if parameters is None:
            parameters = ICalParameters()
        data_type = value.get_data_type()
        if data_type is None:
            data_type = ICalDataType.DATE_TIME
        return self._parse(value.get_multivalued(), data_type, parameters,
                           warnings)

    def _parse(self, value_strs, data_type, parameters, warnings):
        if warnings is None:
            warnings = []
        tzid = parameters.get_tzid()
        if data_type == ICalDataType.PERIOD:
            periods = PeriodList()
            for period_str in value_strs:
                period = self._parse_period(period_str, tzid, warnings)
                if period is not None:
                    periods.append(period)
            return RecurrenceDates(periods)
        has_time = (data_type == ICalDataType.DATE_TIME)
        dates = DateList(has_time=has_time)
        for date_str in value_strs:
            d = iso.parse_date(date_str, tzid)
            if d is None:
                self._warn(warnings, "Skipping unparsable date: %s" %
                           date_str)
                continue
            dates.append(iso.ICalDate(d.value, has_time))
        return RecurrenceDates(dates)

    def _parse_period(self, period_str, tzid, warnings):
        start_str, sep, end_str = period_str.partition('/')
        if not sep or not end_str:
            self._warn(warnings,
                       "No end date or duration found, skipping time "
                       "period: %s" % period_str)
            return None
        start = iso.parse_date(start_str, tzid)
        if start is None:
            self._warn(warnings,
                       "Could not parse start date, skipping time "
                       "period: %s" % period_str)
            return None
        # an end date-time takes precedence over a duration
        end = iso.parse_date(end_str, tzid)
        if end is not None:
            return Period(start.value, end=end.value)
        duration = iso.parse_duration(end_str)
        if duration is not None:
            return Period(start.value, duration=duration)
        self._warn(warnings,
                   "Could not parse end date or duration value, skipping "
                   "time period: %s" % period_str)
        return None

    def _warn(self, warnings, message):
        logging.debug("%s: %s", self.property_name, message)
        warnings.append(message)
