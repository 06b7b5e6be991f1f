#! /usr/bin/env python

import datetime
import unittest

from icalcodec.iso8601 import Duration, ICalDate
from icalcodec.values import DateList, Period, PeriodList


UTC = datetime.timezone.utc


def suite():
    loader = unittest.TestLoader()
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(PeriodTests),
        loader.loadTestsFromTestCase(DateListTests),
        loader.loadTestsFromTestCase(PeriodListTests)
    ))


class PeriodTests(unittest.TestCase):

    def setUp(self):        # noqa
        self.start = datetime.datetime(2020, 1, 15, 9, tzinfo=UTC)
        self.end = datetime.datetime(2020, 1, 15, 10, tzinfo=UTC)

    def test_explicit(self):
        p = Period(self.start, self.end)
        self.assertTrue(p.is_explicit())
        self.assertTrue(p.duration is None)
        self.assertTrue(p.get_end() == self.end)
        self.assertTrue(str(p) == "20200115T090000Z/20200115T100000Z")
        self.assertTrue(p.get_string(True) ==
                        "2020-01-15T09:00:00Z/2020-01-15T10:00:00Z")

    def test_implicit(self):
        p = Period(self.start, duration=Duration(minutes=30))
        self.assertFalse(p.is_explicit())
        self.assertTrue(p.get_end() ==
                        datetime.datetime(2020, 1, 15, 9, 30, tzinfo=UTC))
        self.assertTrue(str(p) == "20200115T090000Z/PT30M")
        p2 = Period(self.start, Duration(minutes=30))
        self.assertTrue(p2.duration == Duration(minutes=30),
                        "duration passed positionally")
        self.assertTrue(p == p2)
        p3 = Period(self.start, datetime.timedelta(minutes=30))
        self.assertTrue(p3 == p, "timedelta converted")

    def test_icaldate(self):
        p = Period(ICalDate(self.start), ICalDate(self.end))
        self.assertTrue(p.start == self.start and p.end == self.end)

    def test_missing_parts(self):
        p = Period(None, self.end)
        self.assertTrue(str(p) == "/20200115T100000Z")
        self.assertTrue(p.get_end() == self.end)
        p = Period(None, duration=Duration(hours=1))
        self.assertTrue(p.get_end() is None)
        p = Period(self.start)
        self.assertTrue(str(p) == "20200115T090000Z/")
        self.assertTrue(p.get_end() is None)

    def test_end_wins(self):
        p = Period(self.start, end=self.end, duration=Duration(hours=2))
        self.assertTrue(str(p) == "20200115T090000Z/20200115T100000Z")

    def test_compare(self):
        p1 = Period(self.start, self.end)
        p2 = Period(self.start, duration=Duration(hours=1))
        self.assertTrue(p1 == Period(self.start, self.end))
        self.assertTrue(hash(p1) == hash(Period(self.start, self.end)))
        self.assertFalse(p1 == p2, "explicit and implicit differ")
        self.assertTrue("end=" in repr(p1))
        self.assertTrue("duration=" in repr(p2))


class DateListTests(unittest.TestCase):

    def test_constructor(self):
        dates = DateList()
        self.assertTrue(len(dates) == 0)
        self.assertTrue(dates.has_time)
        dates = DateList([datetime.date(2020, 1, 15),
                          datetime.date(2020, 1, 16)], has_time=False)
        self.assertTrue(len(dates) == 2)
        for d in dates:
            self.assertTrue(isinstance(d, ICalDate))
            self.assertFalse(d.has_time)

    def test_coercion(self):
        dates = DateList(has_time=True)
        dates.append(datetime.date(2020, 1, 16))
        self.assertTrue(dates[0].has_time, "date promoted to date-time")
        self.assertTrue(dates[0].value == datetime.datetime(2020, 1, 16))
        dates = DateList(has_time=False)
        dates.append(datetime.datetime(2020, 1, 16, 12, tzinfo=UTC))
        self.assertFalse(dates[0].has_time)
        self.assertTrue(dates[0].value.hour == 0)

    def test_mismatch(self):
        dates = DateList(has_time=False)
        d = ICalDate(datetime.datetime(2020, 1, 16, 12, tzinfo=UTC))
        try:
            dates.append(d)
            self.fail("date-time added to date list")
        except ValueError:
            pass
        try:
            dates.insert(0, d)
            self.fail("date-time inserted in date list")
        except ValueError:
            pass
        try:
            DateList([d], has_time=False)
            self.fail("date-time in DateList constructor")
        except ValueError:
            pass
        dates.append(datetime.date(2020, 1, 1))
        try:
            dates[0] = d
            self.fail("date-time assigned to date list")
        except ValueError:
            pass
        self.assertTrue(len(dates) == 1)

    def test_equality(self):
        d1 = DateList([datetime.date(2020, 1, 16)], has_time=False)
        d2 = DateList([datetime.date(2020, 1, 16)], has_time=False)
        d3 = DateList([datetime.date(2020, 1, 16)], has_time=True)
        self.assertTrue(d1 == d2)
        self.assertFalse(d1 != d2)
        self.assertFalse(d1 == d3, "has_time differs")
        self.assertTrue(DateList(has_time=True) != DateList(has_time=False))
        self.assertTrue("has_time=False" in repr(d1))


class PeriodListTests(unittest.TestCase):

    def test_type_check(self):
        start = datetime.datetime(2020, 1, 15, 9, tzinfo=UTC)
        periods = PeriodList([Period(start, duration=Duration(hours=1))])
        self.assertTrue(len(periods) == 1)
        try:
            periods.append(start)
            self.fail("PeriodList accepted a datetime")
        except TypeError:
            pass
        try:
            PeriodList(["20200115T090000Z/PT1H"])
            self.fail("PeriodList accepted a string")
        except TypeError:
            pass
        self.assertTrue(repr(PeriodList()) == "PeriodList([])")


if __name__ == "__main__":
    unittest.main()
