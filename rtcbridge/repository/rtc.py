# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- RTC (Jazz SCM) source backend
# :Creato:   sab 17 ott 2026 11:47:03 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
This module implements the source backend for IBM Rational Team Concert,
driving its ``scm`` command line tool.

The backend interprets the bridge parameters as follows:

rtc-repository
  the repository URI, for example ``https://jazz.example.com:9443/ccm``

rtc-workspace
  the name of the repository workspace, created at initialization and
  then compared against the stream on each run

rtc-stream
  the stream whose history gets replayed
"""

__docformat__ = 'reStructuredText'

from rtcbridge.changes import revisions_from_compare
from rtcbridge.repository import Repository
from rtcbridge.source import SourceWorkingDir, WorkspaceCreationFailure, \
     GetPendingRevisionsFailure, RevisionApplicationFailure


class RtcRepository(Repository):
    METADIR = '.jazz5'
    EXTRA_METADIRS = ['.metadata']

    def _load(self, config):
        self.EXECUTABLE = config.scm_command
        self.repository = config.rtc_repository
        self.workspace = config.rtc_workspace
        self.stream = config.rtc_stream
        self.user = config.rtc_user
        self.password = config.rtc_password

    def credentials(self):
        """
        Return the options carrying the user credentials.
        """

        return ['--username', self.user, '--password', self.password]

    def workingDir(self):
        return RtcWorkingDir(self)


class RtcWorkingDir(SourceWorkingDir):
    """
    A working directory loaded from an RTC repository workspace.
    """

    def _scm(self, args, failure):
        repo = self.repository
        return self._run(repo.command(*args), failure, secrets=[repo.password])

    def _createAndLoadWorkspace(self):
        repo = self.repository

        self._scm(['create', 'workspace'] + repo.credentials() +
                  ['--repository-uri', repo.repository,
                   '--stream', repo.stream, repo.workspace],
                  WorkspaceCreationFailure)
        self._scm(['load'] + repo.credentials() +
                  ['%s@%s' % (repo.workspace, repo.repository)],
                  WorkspaceCreationFailure)

    def _getPendingRevisions(self):
        repo = self.repository

        output = self._scm(['compare', 'ws', repo.workspace,
                            'stream', repo.stream] + repo.credentials() +
                           ['--include-types', 's'],
                           GetPendingRevisionsFailure)
        return revisions_from_compare(output)

    def _advanceTo(self, revision_id):
        self._scm(['accept'] + self.repository.credentials() +
                  ['--changes', revision_id],
                  RevisionApplicationFailure)
