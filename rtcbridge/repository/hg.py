# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Mercurial target backend
# :Creato:   sab 17 ott 2026 12:15:26 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
This module implements the target backend for Mercurial, thru its
command line tool.
"""

__docformat__ = 'reStructuredText'

from rtcbridge.repository import Repository
from rtcbridge.target import TargetWorkingDir, TargetInitializationFailure, \
     CommitFailure, PushFailure


NOTHING_CHANGED = 1
"""Exit status of ``hg commit`` and ``hg push`` when there was nothing to do."""


class HgRepository(Repository):
    METADIR = '.hg'

    def _load(self, config):
        self.EXECUTABLE = config.hg_command
        self.repository = config.hg_repository

    def workingDir(self, ignored_metadirs=()):
        return HgWorkingDir(self, ignored_metadirs)


class HgWorkingDir(TargetWorkingDir):

    def _hg(self, args, failure, ok_status=None):
        return self._run(self.repository.command(*args), failure,
                         ok_status=ok_status)

    def _initializeRepository(self):
        self._hg(['init'], TargetInitializationFailure)

    def _addRemoveAll(self):
        cmd = ['addremove', '--quiet']
        for md in self.ignored_metadirs:
            cmd.extend(['--exclude', md])
        self._hg(cmd, CommitFailure)

    def _commit(self, message, author):
        self._hg(['commit', '-m', message, '-u', author], CommitFailure,
                 ok_status=(0, NOTHING_CHANGED))

    def _push(self, remote_url):
        self._hg(['push', '--quiet', remote_url], PushFailure,
                 ok_status=(0, NOTHING_CHANGED))
