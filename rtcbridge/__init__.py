# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge - RTC to Mercurial bridge
# :Creato:   sab 17 ott 2026 09:12:40 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
rtcbridge - RTC to Mercurial bridge
===================================

This package encapsulates the machinery needed to replay the history of
an RTC stream over a Mercurial repository, one revision at a time.
"""

__docformat__ = 'reStructuredText'


class BridgeException(Exception):
    "Common base for bridge exceptions"

class BridgeBug(BridgeException):
    "Bridge bug (please report)"
