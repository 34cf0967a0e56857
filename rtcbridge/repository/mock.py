# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- mock backends
# :Creato:   sab 17 ott 2026 12:40:58 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
This module implements mock source and target backends to be used in
tests: they execute nothing, but record each operation in a *journal*
shared between the two.
"""

__docformat__ = 'reStructuredText'

import os

from rtcbridge.repository import Repository
from rtcbridge.source import SourceWorkingDir, WorkspaceCreationFailure, \
     RevisionApplicationFailure
from rtcbridge.target import TargetWorkingDir, TargetInitializationFailure, \
     CommitFailure, PushFailure


FAILURES = {
    'create': WorkspaceCreationFailure,
    'accept': RevisionApplicationFailure,
    'init': TargetInitializationFailure,
    'commit': CommitFailure,
    'push': PushFailure,
}


class MockRepository(Repository):
    METADIR = '.mock'

    def _load(self, config):
        self.repository = (self.which == 'source' and config.rtc_repository
                           or config.hg_repository)

    def workingDir(self, journal=None, ignored_metadirs=()):
        if journal is None:
            journal = []
        if self.which == 'source':
            return MockSourceWorkingDir(self, journal)
        else:
            return MockTargetWorkingDir(self, journal, ignored_metadirs)


class MockJournalMixin(object):
    """
    Record the operations, and possibly fail on request.
    """

    def _setupJournal(self, journal):
        self.journal = journal
        self.failures = {}
        self.calls = {}

    def failOn(self, operation, nth=1):
        """
        Make the `nth` call (starting from 1) to `operation` fail.
        """

        self.failures[operation] = nth

    def _record(self, operation, *args):
        count = self.calls.get(operation, 0) + 1
        self.calls[operation] = count
        if self.failures.get(operation) == count:
            raise FAILURES[operation]("mock %s #%d failed" % (operation, count))
        self.journal.append((operation,) + args)


class MockSourceWorkingDir(MockJournalMixin, SourceWorkingDir):
    def __init__(self, repository, journal):
        SourceWorkingDir.__init__(self, repository)
        self._setupJournal(journal)
        self.revisions = []
        self.queries = 0

    def _createAndLoadWorkspace(self):
        self._record('create', self.repository.config.rtc_workspace)
        basedir = self.repository.basedir
        os.makedirs(os.path.join(basedir, self.repository.METADIR))
        with open(os.path.join(basedir, 'README'), 'w') as f:
            f.write('Loaded from %s\n' % self.repository.repository)

    def _getPendingRevisions(self):
        self.queries += 1
        return iter(self.revisions)

    def _advanceTo(self, revision_id):
        self._record('accept', revision_id)


class MockTargetWorkingDir(MockJournalMixin, TargetWorkingDir):
    def __init__(self, repository, journal, ignored_metadirs=()):
        TargetWorkingDir.__init__(self, repository, ignored_metadirs)
        self._setupJournal(journal)

    def _initializeRepository(self):
        self._record('init')
        os.mkdir(os.path.join(self.repository.basedir, '.hg'))

    def _addRemoveAll(self):
        pass

    def _commit(self, message, author):
        self._record('commit', message, author)

    def _push(self, remote_url):
        self._record('push', remote_url)
