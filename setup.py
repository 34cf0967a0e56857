#!/usr/bin/env python3

from os import walk
from setuptools import setup
from rtcbridge.frontend import __version__ as VERSION

setup(name='rtcbridge',
      version=VERSION,
      author='rtcbridge contributors',
      packages=[dirpath.replace('/', '.')
                for dirpath, dirnames, filenames in walk('rtcbridge')
                if dirpath != 'rtcbridge/tests' and '__init__.py' in filenames],
      scripts=['rtc2hg.py'],
      entry_points={'console_scripts': ['rtc2hg = rtcbridge.frontend:main']},
      python_requires='>=3.6',
      extras_require={'test': ['pytest']},
      description='A one-way bridge replaying the history of an RTC '
      'stream over a Mercurial repository.',
      long_description="""\
The bridge creates an RTC repository workspace on a stream, loads it in
a directory that is also a Mercurial repository and pushes its content.
Then, each time it runs, it accepts the revisions delivered to the stream
one at a time, committing and pushing each of them to Mercurial.
""",
      classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Operating System :: Unix',
        'Topic :: Software Development :: Version Control',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        ]
    )
