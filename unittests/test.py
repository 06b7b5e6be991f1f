#! /usr/bin/env python
"""Runs unit tests on all icalcodec modules"""

import unittest
import logging

import test_grammar
import test_iso8601
import test_jcal
import test_params
import test_rdate
import test_values
import test_xcal


all_tests = unittest.TestSuite()
all_tests.addTest(test_grammar.suite())
all_tests.addTest(test_iso8601.suite())
all_tests.addTest(test_jcal.suite())
all_tests.addTest(test_params.suite())
all_tests.addTest(test_rdate.suite())
all_tests.addTest(test_values.suite())
all_tests.addTest(test_xcal.suite())


def suite():
    global all_tests
    return all_tests


def load_tests(loader, tests, pattern):
    return suite()

if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
