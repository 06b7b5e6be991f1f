#! /usr/bin/env python

import unittest

from icalcodec.params import ICalDataType, ICalParameters
from icalcodec.xcal import XCAL_NAMESPACE, XCalElement, local_name


def suite():
    loader = unittest.TestLoader()
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(XCalElementTests),
    ))


RDATE_XML = """<rdate xmlns="urn:ietf:params:xml:ns:icalendar-2.0">
    <parameters>
        <tzid><text>America/New_York</text></tzid>
        <x-multi><text>a</text><text>b</text></x-multi>
    </parameters>
    <date-time>2020-01-15T09:00:00</date-time>
    <date>2020-01-16</date>
    <date-time>2020-01-17T09:00:00</date-time>
    <date-time xmlns="urn:example:other">2020-01-18T09:00:00</date-time>
    <date-time/>
</rdate>"""


class XCalElementTests(unittest.TestCase):

    def test_local_name(self):
        self.assertTrue(local_name("start") == "start")
        self.assertTrue(local_name(ICalDataType.DATE_TIME) == "date-time")
        self.assertTrue(local_name(ICalDataType.PERIOD) == "period")

    def test_new(self):
        e = XCalElement.new("rdate")
        self.assertTrue(e.get_name() == "rdate")
        self.assertTrue(e.element.tag == "{%s}rdate" % XCAL_NAMESPACE)
        self.assertTrue(e.get_text() is None)

    def test_append(self):
        e = XCalElement.new("rdate")
        child = e.append(ICalDataType.DATE, "2020-01-16")
        self.assertTrue(child.get_name() == "date")
        self.assertTrue(child.get_text() == "2020-01-16")
        period = e.append(ICalDataType.PERIOD)
        period.append("start", "2020-01-15T09:00:00Z")
        period.append("duration", "PT1H")
        self.assertTrue(e.first(ICalDataType.DATE) == "2020-01-16")
        periods = e.children("period")
        self.assertTrue(len(periods) == 1)
        self.assertTrue(periods[0].first("start") == "2020-01-15T09:00:00Z")
        self.assertTrue(periods[0].first("end") is None)
        self.assertTrue(periods[0].first("duration") == "PT1H")

    def test_round_trip_str(self):
        e = XCalElement.new("rdate")
        e.append(ICalDataType.DATE_TIME, "2020-01-15T09:00:00Z")
        src = e.to_str()
        self.assertTrue(XCAL_NAMESPACE in src)
        e2 = XCalElement.from_str(src)
        self.assertTrue(e2.all("date-time") == ["2020-01-15T09:00:00Z"])
        e3 = XCalElement.from_str(src.encode('utf-8'))
        self.assertTrue(e3.get_name() == "rdate")

    def test_read(self):
        e = XCalElement.from_str(RDATE_XML)
        self.assertTrue(e.all(ICalDataType.DATE_TIME) ==
                        ["2020-01-15T09:00:00", "2020-01-17T09:00:00", ""],
                        "other namespaces ignored, document order")
        self.assertTrue(e.all(ICalDataType.DATE) == ["2020-01-16"])
        self.assertTrue(e.first(ICalDataType.DATE_TIME) ==
                        "2020-01-15T09:00:00")
        self.assertTrue(e.first(ICalDataType.PERIOD) is None)
        self.assertTrue(e.children(ICalDataType.PERIOD) == [])
        self.assertTrue(e.all("end") == [])

    def test_parameters(self):
        e = XCalElement.from_str(RDATE_XML)
        params = e.parameters()
        self.assertTrue(params.get_tzid() == "America/New_York")
        self.assertTrue(params.get("X-MULTI") == ["a", "b"])
        self.assertTrue(len(XCalElement.new("rdate").parameters()) == 0)

    def test_set_parameters(self):
        e = XCalElement.new("rdate")
        e.append(ICalDataType.DATE, "2020-01-16")
        params = ICalParameters()
        params.set_tzid("Europe/London")
        e.set_parameters(params)
        self.assertTrue(e.element[0].tag ==
                        "{%s}parameters" % XCAL_NAMESPACE,
                        "parameters come first")
        self.assertTrue(e.parameters() == params)
        e2 = XCalElement.from_str(e.to_str())
        self.assertTrue(e2.parameters().get_tzid() == "Europe/London")
        e.set_parameters(ICalParameters())
        self.assertTrue(len(e.children("parameters")) == 0)


if __name__ == "__main__":
    unittest.main()
