#! /usr/bin/env python
"""ISO8601 dates, date-times and durations as used by iCalendar

iCalendar values use a restricted profile of ISO 8601: calendar dates,
calendar date-times with an optional UTC designator or numeric offset,
and signed durations expressed in weeks, days, hours, minutes and
seconds.  The plain text format uses the basic form (no separators),
xCal uses the extended form and jCal accepts either."""

import datetime
import logging
import zoneinfo

from .grammar import BasicParser
from .sortable import SortableMixin


class DateTimeError(ValueError):
    pass


UTC = datetime.timezone.utc

_zones = {}


def get_timezone(tzid):
    """Returns a tzinfo object for the TZID parameter *tzid*

    Returns None if *tzid* is None or can't be resolved, values are then
    interpreted as floating times.  Globally unique identifiers (those
    beginning with a '/') are looked up without the prefix.  Results
    are cached."""
    if tzid is None:
        return None
    try:
        return _zones[tzid]
    except KeyError:
        pass
    key = tzid.strip()
    if key.startswith('/'):
        key = key[1:]
    if key.upper() == 'UTC':
        tz = UTC
    else:
        try:
            tz = zoneinfo.ZoneInfo(key)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
            logging.warning("Unrecognized TZID %s, parsing as floating time",
                            repr(tzid))
            tz = None
    _zones[tzid] = tz
    return tz


class ICalDate(SortableMixin):

    """An immutable date or date-time value

    value
        A :class:`datetime.datetime` (or :class:`datetime.date`)
        instance.  Aware values represent absolute instants, naive
        values are floating times.

    has_time
        True if the time of day is significant.  When False the value
        is normalised to midnight of its calendar day, a plain
        :class:`datetime.date` always results in has_time False.

    Instances compare by instant and has_time, so a value parsed with a
    TZID compares equal to the same instant written out in UTC."""

    def __init__(self, value, has_time=True):
        if not isinstance(value, datetime.datetime):
            if isinstance(value, datetime.date):
                value = datetime.datetime(value.year, value.month,
                                          value.day)
                has_time = False
            else:
                raise TypeError("ICalDate requires date or datetime: %s" %
                                repr(value))
        if not has_time:
            value = value.replace(hour=0, minute=0, second=0,
                                  microsecond=0)
        self.value = value
        self.has_time = bool(has_time)

    @classmethod
    def from_str(cls, src, tzid=None):
        """Parses a date or date-time from *src*

        tzid
            The TZID parameter in force, used only when src contains no
            zone designator.

        Raises :class:`DateTimeError` if src can't be parsed."""
        p = ISO8601Parser(src.strip())
        try:
            return p.require_date_value_end(get_timezone(tzid))
        except ValueError as err:
            raise DateTimeError("%s: %s" % (repr(src), str(err)))

    def date(self):
        """Returns the calendar day as a :class:`datetime.date`"""
        return self.value.date()

    def is_floating(self):
        return self.value.tzinfo is None

    def get_string(self, extended=False):
        return format_date(self.value, self.has_time, extended)

    def __str__(self):
        return self.get_string()

    def __repr__(self):
        return "ICalDate(%s, has_time=%s)" % (repr(self.value),
                                              repr(self.has_time))

    def sortkey(self):
        return (self.value, self.has_time)


def parse_date(src, tzid=None):
    """Parses a date or date-time value

    Returns an :class:`ICalDate` instance or None if *src* is not a
    valid date or date-time in either the basic or extended form.  No
    exception is raised for bad input."""
    p = ISO8601Parser(src.strip())
    return p.parse_production(p.require_date_value_end, get_timezone(tzid))


def format_date(value, has_time=True, extended=False):
    """Formats a date or date-time value

    value
        A :class:`datetime.datetime` or :class:`ICalDate` instance.

    has_time
        If False, only the calendar day is written.  Ignored if value
        is an ICalDate.

    extended
        True for the extended form (hyphens and colons), the default is
        the basic form.

    Dates are written using the calendar day of the value itself.
    Aware date-times are converted to UTC and written with a 'Z',
    floating date-times are written without a zone designator."""
    if isinstance(value, ICalDate):
        has_time = value.has_time
        value = value.value
    if extended:
        dsep, tsep = '-', ':'
    else:
        dsep, tsep = '', ''
    if not has_time:
        return "%04i%s%02i%s%02i" % (value.year, dsep, value.month, dsep,
                                     value.day)
    zone = ''
    if value.tzinfo is not None and value.utcoffset() is not None:
        value = value.astimezone(UTC)
        zone = 'Z'
    return "%04i%s%02i%s%02iT%02i%s%02i%s%02i%s" % (
        value.year, dsep, value.month, dsep, value.day,
        value.hour, tsep, value.minute, tsep, value.second, zone)


class Duration(SortableMixin):

    """A signed iCalendar duration

    The components are weeks, days, hours, minutes and seconds, each of
    which is either an integer or None if it is not present.  *sign* is
    1 or -1.  Durations compare by length and then by their canonical
    string so PT1H and PT60M are ordered equal in time but are not
    equal."""

    def __init__(self, weeks=None, days=None, hours=None, minutes=None,
                 seconds=None, sign=1):
        self.weeks = weeks
        self.days = days
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.sign = -1 if sign < 0 else 1

    @classmethod
    def from_str(cls, src):
        """Parses a duration from *src*

        Raises :class:`DateTimeError` if src can't be parsed."""
        p = ISO8601Parser(src.strip())
        try:
            return p.require_duration_end()
        except ValueError as err:
            raise DateTimeError("%s: %s" % (repr(src), str(err)))

    @classmethod
    def from_timedelta(cls, delta):
        """Creates a duration from a :class:`datetime.timedelta`

        The result uses days, hours, minutes and seconds only, zero
        components are omitted."""
        sign = 1
        if delta < datetime.timedelta(0):
            sign = -1
            delta = -delta
        hours, rem = divmod(delta.seconds, 3600)
        minutes, seconds = divmod(rem, 60)
        return cls(days=delta.days or None, hours=hours or None,
                   minutes=minutes or None, seconds=seconds or None,
                   sign=sign)

    def to_timedelta(self):
        delta = datetime.timedelta(weeks=self.weeks or 0,
                                   days=self.days or 0,
                                   hours=self.hours or 0,
                                   minutes=self.minutes or 0,
                                   seconds=self.seconds or 0)
        return -delta if self.sign < 0 else delta

    def get_string(self):
        result = ['-P' if self.sign < 0 else 'P']
        if self.weeks is not None:
            result.append("%iW" % self.weeks)
        if self.days is not None:
            result.append("%iD" % self.days)
        time_part = []
        for value, designator in ((self.hours, 'H'), (self.minutes, 'M'),
                                  (self.seconds, 'S')):
            if value is not None:
                time_part.append("%i%s" % (value, designator))
        if time_part:
            result.append('T')
            result = result + time_part
        elif len(result) == 1:
            # no components at all
            result.append('T0S')
        return ''.join(result)

    def __str__(self):
        return self.get_string()

    def __repr__(self):
        return "Duration.from_str(%s)" % repr(self.get_string())

    def sortkey(self):
        return (self.to_timedelta(), self.get_string())


def parse_duration(src):
    """Parses a duration value

    Returns a :class:`Duration` instance or None if *src* is not a
    valid duration.  No exception is raised for bad input."""
    p = ISO8601Parser(src.strip())
    return p.parse_production(p.require_duration_end)


class ISO8601Parser(BasicParser):

    """Parser for the iCalendar profile of ISO 8601"""

    def require_date_value(self, tzinfo=None):
        """Parses a date or date-time returning an :class:`ICalDate`

        tzinfo
            The zone to use if the value contains no zone designator,
            None for floating values.  Date only values represent
            midnight in this zone.

        The date part may be in basic (YYYYMMDD) or extended
        (YYYY-MM-DD) form; the time part may use colons or not and may
        contain fractional seconds, which are truncated to
        microseconds.  A leap second is clamped to 59."""
        year = self.require_fixed_integer(4, production="year")
        extended = self.parse('-') is not None
        month = self.require_fixed_integer(2, 1, 12, production="month")
        if extended:
            self.require('-')
        day = self.require_fixed_integer(2, 1, 31, production="day")
        if not self.parse('T'):
            return ICalDate(self._new_datetime(year, month, day, 0, 0, 0, 0,
                                               tzinfo), has_time=False)
        hour = self.require_fixed_integer(2, 0, 23, production="hour")
        self.parse(':')
        minute = self.require_fixed_integer(2, 0, 59, production="minute")
        self.parse(':')
        second = self.require_fixed_integer(2, 0, 60, production="second")
        if second == 60:
            second = 59
        microsecond = 0
        if self.parse_one('.,'):
            digits = self.require_production(self.parse_digits(1),
                                             "fraction")
            microsecond = int((digits + "000000")[:6])
        zone = self.parse_zone()
        if zone is not None:
            tzinfo = zone
        return ICalDate(self._new_datetime(year, month, day, hour, minute,
                                           second, microsecond, tzinfo))

    def require_date_value_end(self, tzinfo=None):
        result = self.require_date_value(tzinfo)
        self.require_end("end of date value")
        return result

    def _new_datetime(self, year, month, day, hour, minute, second,
                      microsecond, tzinfo):
        try:
            return datetime.datetime(year, month, day, hour, minute, second,
                                     microsecond, tzinfo=tzinfo)
        except ValueError as err:
            raise DateTimeError(str(err))

    def parse_zone(self):
        """Parses an optional zone designator

        Returns a tzinfo instance or None if there is no zone
        designator."""
        if self.parse('Z'):
            return UTC
        zdirection = self.parse_one('+-')
        if zdirection is None:
            return None
        zhour = self.require_fixed_integer(2, 0, 23, production="zone hour")
        zminute = 0
        if self.parse(':'):
            zminute = self.require_fixed_integer(2, 0, 59,
                                                 production="zone minute")
        elif self.match_digit():
            zminute = self.require_fixed_integer(2, 0, 59,
                                                 production="zone minute")
        offset = datetime.timedelta(hours=zhour, minutes=zminute)
        if not offset:
            return UTC
        if zdirection == '-':
            offset = -offset
        return datetime.timezone(offset)

    def require_duration(self):
        """Parses a duration returning a :class:`Duration` instance

        The syntax is an optional sign, the designator 'P' then weeks
        and/or days followed by an optional time part introduced by 'T'
        containing hours, minutes and seconds in that order.  At least
        one component is required."""
        d = Duration(sign=-1 if self.parse_one('+-') == '-' else 1)
        self.require('P', "duration")
        ncomponents = 0
        n = self.parse_integer()
        if n is not None and self.parse('W'):
            d.weeks = n
            ncomponents += 1
            n = self.parse_integer()
        if n is not None:
            self.require('D', "duration designator")
            d.days = n
            ncomponents += 1
        if self.parse('T'):
            tcomponents = 0
            n = self.parse_integer()
            for attr, designator in (('hours', 'H'), ('minutes', 'M'),
                                     ('seconds', 'S')):
                if n is None:
                    break
                if self.parse(designator):
                    setattr(d, attr, n)
                    tcomponents += 1
                    n = self.parse_integer()
            if n is not None:
                self.parser_error("duration time designator")
            if not tcomponents:
                self.parser_error("duration time component")
            ncomponents += tcomponents
        if not ncomponents:
            self.parser_error("duration component")
        return d

    def require_duration_end(self):
        result = self.require_duration()
        self.require_end("end of duration")
        return result
