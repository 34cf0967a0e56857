# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Tests for the revision log parser
# :Creato:   sab 17 ott 2026 15:26:40 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

from unittest import TestCase

from rtcbridge.changes import Revision, RevisionLogParseError, \
     revisions_from_compare

__all__ = ['RevisionLogParser']


class RevisionLogParser(TestCase):
    """Test the parser of ``scm compare`` output"""

    def testWellFormedLines(self):
        """Verify each line becomes a Revision, in the same order"""

        revs = list(revisions_from_compare("(101) Fix bug\n"
                                           "(102) Add feature\n"))
        self.assertEqual(revs, [Revision('101', 'Fix bug'),
                                Revision('102', 'Add feature')])
        self.assertEqual(revs[0].id, '101')
        self.assertEqual(revs[1].message, 'Add feature')

    def testIndentedLines(self):
        """Verify the identifier may be preceded by blanks"""

        revs = list(revisions_from_compare("    (1234) Deliver the \"fix\"\n"
                                           "  (99) It's (almost) done"))
        self.assertEqual(revs, [Revision('1234', 'Deliver the "fix"'),
                                Revision('99', "It's (almost) done")])

    def testEmptyOutput(self):
        """Verify an empty output means nothing to do"""

        self.assertEqual(list(revisions_from_compare('')), [])

    def testBlankLine(self):
        """Verify blank lines are not silently skipped"""

        revs = revisions_from_compare("(101) Fix bug\n"
                                      "\n"
                                      "(102) Add feature\n")
        self.assertEqual(next(revs), Revision('101', 'Fix bug'))
        try:
            next(revs)
        except RevisionLogParseError as e:
            self.assertEqual(e.line, '')
            self.assertEqual(e.lineno, 2)
        else:
            self.fail("Blank line silently skipped")

        self.assertRaises(RevisionLogParseError, list,
                          revisions_from_compare('\n  \n'))

    def testMalformedLine(self):
        """Verify a line without a numeric identifier is an error"""

        revs = revisions_from_compare("(101) Fix bug\n"
                                      "Change sets:\n"
                                      "(102) Add feature\n")
        self.assertEqual(next(revs), Revision('101', 'Fix bug'))
        try:
            next(revs)
        except RevisionLogParseError as e:
            self.assertEqual(e.line, 'Change sets:')
            self.assertEqual(e.lineno, 2)
            self.assertTrue('Change sets:' in str(e))
        else:
            self.fail("Malformed line silently accepted")

    def testNonNumericIdentifier(self):
        """Verify the identifier must be made of digits"""

        self.assertRaises(RevisionLogParseError, list,
                          revisions_from_compare("(abc) Not a revision\n"))
        self.assertRaises(RevisionLogParseError, list,
                          revisions_from_compare("(101)missing space\n"))

    def testRevisionIsImmutable(self):
        """Verify Revision instances cannot be altered"""

        rev = Revision('7', 'Seven')
        self.assertRaises(AttributeError, setattr, rev, 'id', '8')
        self.assertEqual(str(rev), '(7) Seven')
