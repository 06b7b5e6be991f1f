#!/usr/bin/env python

import logging
import sys

import icalcodec.info

if sys.hexversion < 0x03090000:
    logging.error("icalcodec requires Python Version 3.9 (or greater)")
else:
    from setuptools import setup

    with open('README.rst') as f:
        long_description = f.read()

    setup(name=icalcodec.info.name,
          version=icalcodec.info.version,
          description=icalcodec.info.title,
          long_description=long_description,
          packages=['icalcodec'],
          install_requires=['lxml', 'tzdata'],
          python_requires='>=3.9',
          classifiers=['Development Status :: 3 - Alpha',
                       'Intended Audience :: Developers',
                       'Natural Language :: English',
                       'License :: OSI Approved :: BSD License',
                       'Operating System :: OS Independent',
                       'Programming Language :: Python',
                       'Programming Language :: Python :: 3',
                       'Topic :: Office/Business :: Scheduling',
                       'Topic :: Software Development :: '
                       'Libraries :: Python Modules']
          )
