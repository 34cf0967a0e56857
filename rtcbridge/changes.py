# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Revisions
# :Creato:   sab 17 ott 2026 09:48:02 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
Revisions are an object representation of a single upstream change set,
as reported by ``scm compare``.
"""

__docformat__ = 'reStructuredText'

from collections import namedtuple
from re import compile

from rtcbridge import BridgeException


class RevisionLogParseError(BridgeException):
    "Unrecognized line in the upstream revision log"

    def __init__(self, line, lineno=None):
        self.line = line
        self.lineno = lineno
        if lineno is None:
            msg = "Cannot parse revision log line %r" % line
        else:
            msg = "Cannot parse revision log line %d: %r" % (lineno, line)
        BridgeException.__init__(self, msg)


class Revision(namedtuple('Revision', 'id message')):
    """
    Represent a single upstream revision.

    The `id` is an opaque token, only meaningful to the upstream
    system; the `message` is the free-form description of the change.
    """

    __slots__ = ()

    def __str__(self):
        return '(%s) %s' % (self.id, self.message)


revision_re = compile(r'\(([0-9]+)\) (.*)')


def revisions_from_compare(output):
    """
    Parse the output of ``scm compare``, one revision per line.

    Each line must contain a parenthesized decimal identifier followed
    by a space and the message, like ``(1234) Fix the frobnicator``.
    Any other line, blank ones included, raises `RevisionLogParseError`.

    Return an iterator over `Revision` instances, in the same order
    they appear in `output`.
    """

    for lineno, line in enumerate(output.splitlines(), 1):
        match = revision_re.search(line)
        if match is None:
            raise RevisionLogParseError(line, lineno)
        yield Revision(match.group(1), match.group(2))
