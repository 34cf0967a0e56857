# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Test suite
# :Creato:   sab 17 ott 2026 15:20:09 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

from rtcbridge.tests.test_shwrap import *
from rtcbridge.tests.test_changes import *
from rtcbridge.tests.test_config import *
from rtcbridge.tests.test_bridge import *
from rtcbridge.tests.test_backends import *
from rtcbridge.tests.test_frontend import *
