# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Tests for the command line frontend
# :Creato:   sab 17 ott 2026 18:04:36 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

from contextlib import redirect_stderr
from io import StringIO
from os import makedirs
from os.path import exists, join

from rtcbridge.frontend import main
from rtcbridge.shwrap import ExternalCommand
from rtcbridge.tests.test_backends import FakeToolsTestCase, HG_URL, \
     RTC_URI, PASSWORD

__all__ = ['CommandLine']


class CommandLine(FakeToolsTestCase):
    """Test the command line frontend"""

    def setUp(self):
        FakeToolsTestCase.setUp(self)
        self.configfile = join(self.testdir, 'bridge.ini')
        with open(self.configfile, 'w') as f:
            f.write("[bridge]\n"
                    "directory = %s\n"
                    "mercurial-repository = %s\n"
                    "rtc-repository = %s\n"
                    "rtc-workspace = bridge-workspace\n"
                    "rtc-stream = BRM Stream\n"
                    "rtc-user = ben\n"
                    "rtc-password = %s\n"
                    "scm-command = %s\n"
                    "hg-command = %s\n" % (
                        self.config.directory, HG_URL, RTC_URI, PASSWORD,
                        self.config.scm_command, self.config.hg_command))

    def tearDown(self):
        ExternalCommand.DEBUG = False
        ExternalCommand.DRY_RUN = False

    def assertUsageError(self, argv):
        stderr = StringIO()
        with redirect_stderr(stderr):
            try:
                main(argv)
            except SystemExit as e:
                self.assertEqual(e.code, 2)
            else:
                self.fail("%r accepted" % argv)
        self.assertTrue('Usage:' in stderr.getvalue())
        return stderr.getvalue()

    def testMissingAction(self):
        """Verify an action is mandatory"""

        self.assertUsageError(['-c', self.configfile])

    def testBothActions(self):
        """Verify the actions are mutually exclusive"""

        self.assertUsageError(['-c', self.configfile, '--init', '--run'])

    def testMissingParameters(self):
        """Verify every parameter is mandatory"""

        error = self.assertUsageError(['--run', '-d', self.config.directory])
        self.assertTrue('mercurial-repository' in error)
        self.assertTrue('rtc-password' in error)

    def testUnreadableConfigFile(self):
        """Verify a missing config file is a bad invocation"""

        self.assertUsageError(['--run', '-c', join(self.testdir, 'nope.ini')])

    def testInitAndRun(self):
        """Verify both actions succeed over the fake tools"""

        self.assertEqual(main(['--init', '-c', self.configfile]), 0)
        self.assertTrue(exists(self.config.directory))
        self.answer('scm', 'compare', "(101) Fix bug\n")
        self.assertEqual(main(['--run', '-c', self.configfile,
                               '--author', 'rtc-bridge']), 0)
        commits = [argv for tool, argv in self.calls()
                   if argv[0] == 'commit']
        self.assertEqual(commits[-1], ['commit', '-m', '101: Fix bug',
                                       '-u', 'rtc-bridge'])

    def testRunNotInitialized(self):
        """Verify running on a missing directory fails"""

        self.assertEqual(main(['--run', '-c', self.configfile]), 1)
        self.assertEqual(self.calls(), [])

    def testFailingRun(self):
        """Verify an external failure gives a non zero exit status"""

        makedirs(self.config.directory)
        self.answer('scm', 'compare', "(101) Fix bug\n")
        self.answer('scm', 'accept', status=1)
        self.assertEqual(main(['--run', '-c', self.configfile]), 1)

    def testUnknownTool(self):
        """Verify a missing external tool fails before doing anything"""

        with open(self.configfile) as f:
            content = f.read()
        with open(self.configfile, 'w') as f:
            f.write(content.replace(self.config.scm_command,
                                    join(self.bindir, 'nope')))
        self.assertEqual(main(['--init', '-c', self.configfile]), 1)
        self.assertFalse(exists(self.config.directory))

    def testDryRun(self):
        """Verify nothing gets executed in dry run mode"""

        self.assertEqual(main(['--init', '--dry-run', '-c', self.configfile]),
                         0)
        self.assertFalse(exists(self.config.directory))
        self.assertEqual(self.calls(), [])

    def testUnusableDirectory(self):
        """Verify a system error is reported, not raised"""

        plain = join(self.testdir, 'plain')
        with open(plain, 'w') as f:
            f.write('not a directory\n')
        with open(self.configfile) as f:
            content = f.read()
        with open(self.configfile, 'w') as f:
            f.write(content.replace(self.config.directory,
                                    join(plain, 'bridge')))
        with self.assertLogs('rtcbridge', 'CRITICAL') as logged:
            self.assertEqual(main(['--init', '-c', self.configfile]), 1)
        self.assertTrue('Bridge init failed' in logged.output[-1])
        self.assertEqual(self.calls(), [])
