#! /usr/bin/env python
"""Periods and the two list shapes of a recurrence dates value"""

import datetime

from .iso8601 import Duration, ICalDate, format_date
from .sortable import SortableMixin


class Period(SortableMixin):

    """An immutable period of time

    start
        A :class:`datetime.datetime` or None.  A missing start is only
        ever created when reading a period that has no start from xCal.

    end
        A :class:`datetime.datetime` marking the end of the period

    duration
        A :class:`iso8601.Duration`, the length of the period

    A period is explicit (start and end) or implicit (start and
    duration).  If both are passed the end takes precedence in the
    string forms."""

    def __init__(self, start, end=None, duration=None):
        if isinstance(start, ICalDate):
            start = start.value
        if isinstance(end, ICalDate):
            end = end.value
        if isinstance(end, Duration):
            end, duration = None, end
        elif isinstance(end, datetime.timedelta):
            end, duration = None, Duration.from_timedelta(end)
        self.start = start
        self.end = end
        self.duration = duration

    def is_explicit(self):
        """True if this period has an end date-time"""
        return self.end is not None

    def get_end(self):
        """Returns the end of the period

        For implicit periods the end is calculated from the start and
        the duration.  Returns None if there is no start or no way of
        determining the end."""
        if self.end is not None:
            return self.end
        elif self.start is not None and self.duration is not None:
            return self.start + self.duration.to_timedelta()
        else:
            return None

    def get_string(self, extended=False):
        """Returns the period as a 'start/end' or 'start/duration'
        string

        A missing start or ending is written as an empty string, the
        separating '/' is always present."""
        result = []
        if self.start is not None:
            result.append(format_date(self.start, True, extended))
        result.append('/')
        if self.end is not None:
            result.append(format_date(self.end, True, extended))
        elif self.duration is not None:
            result.append(self.duration.get_string())
        return ''.join(result)

    def __str__(self):
        return self.get_string()

    def __repr__(self):
        if self.end is not None:
            return "Period(%s, end=%s)" % (repr(self.start), repr(self.end))
        else:
            return "Period(%s, duration=%s)" % (repr(self.start),
                                                repr(self.duration))

    def sortkey(self):
        return (self.start, self.end, self.duration)


class DateList(list):

    """A list of :class:`iso8601.ICalDate` values

    has_time
        True if the values are date-times, False if they are dates.
        This flag is shared by every value in the list: adding a value
        that disagrees with it raises ValueError.

    Plain :class:`datetime.datetime` and :class:`datetime.date` values
    are converted to ICalDate instances on insertion using the list's
    has_time flag."""

    def __init__(self, values=(), has_time=True):
        super(DateList, self).__init__()
        self.has_time = has_time
        self.extend(values)

    def _check(self, value):
        if not isinstance(value, ICalDate):
            value = ICalDate(value, self.has_time)
            if value.has_time != self.has_time:
                value = ICalDate(value.value, self.has_time)
        elif value.has_time != self.has_time:
            raise ValueError("%s in DateList with has_time=%s" %
                             (repr(value), repr(self.has_time)))
        return value

    def append(self, value):
        super(DateList, self).append(self._check(value))

    def extend(self, values):
        super(DateList, self).extend(self._check(v) for v in values)

    def insert(self, index, value):
        super(DateList, self).insert(index, self._check(value))

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = [self._check(v) for v in value]
        else:
            value = self._check(value)
        super(DateList, self).__setitem__(index, value)

    def __eq__(self, other):
        if isinstance(other, DateList):
            if self.has_time != other.has_time:
                return False
        return super(DateList, self).__eq__(other)

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return "DateList(%s, has_time=%s)" % (
            super(DateList, self).__repr__(), repr(self.has_time))


class PeriodList(list):

    """A list of :class:`Period` values"""

    def _check(self, value):
        if not isinstance(value, Period):
            raise TypeError("PeriodList requires Period: %s" % repr(value))
        return value

    def __init__(self, values=()):
        super(PeriodList, self).__init__(self._check(v) for v in values)

    def append(self, value):
        super(PeriodList, self).append(self._check(value))

    def extend(self, values):
        super(PeriodList, self).extend(self._check(v) for v in values)

    def insert(self, index, value):
        super(PeriodList, self).insert(index, self._check(value))

    def __repr__(self):
        return "PeriodList(%s)" % super(PeriodList, self).__repr__()
