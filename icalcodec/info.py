#! /usr/bin/env python
"""The module creates some basic constants to describe the icalcodec package."""

name = "icalcodec"
copyright = "\xA92026, icalcodec contributors"

major_version = "0.1"
build_date = "20261018"
version = "%s.%s" % (major_version, build_date)

title = (
    "icalcodec: "
    "iCalendar recurrence dates for iCal, xCal and jCal")
