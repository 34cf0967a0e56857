#! /usr/bin/env python3
# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Frontend
# :Creato:   sab 17 ott 2026 15:03:22 CEST
# :Autore:   rtcbridge contributors
#

"""Keep a Mercurial repository in sync with an RTC stream.

Examples::

  # Create the workspace "bridge-ws" on the stream "BRM Stream", load it
  # in ~/bridge and push its content to the Mercurial repository
  $ rtc2hg.py --init -d ~/bridge -m ssh://hg.example.com/brm \\
              -t https://jazz.example.com:9443/ccm -w bridge-ws \\
              -s "BRM Stream" -u ben -p secret

  # Replay on Mercurial every RTC revision delivered since last run
  $ rtc2hg.py --run -c ~/bridge.ini

  # Run the test suite
  $ rtc2hg.py test
"""

__docformat__ = 'reStructuredText'

if __name__ == '__main__':
    import sys

    if len(sys.argv)>1 and sys.argv[1] == 'test':
        del sys.argv[1]
        from unittest import main
        main(module='rtcbridge.tests', argv=sys.argv)
    else:
        from rtcbridge.frontend import main

        if len(sys.argv) == 1:
            sys.argv.append('--help')

        sys.exit(main())
