# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Updatable VC working directory
# :Creato:   sab 17 ott 2026 11:06:30 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
Updatable sources are the simplest abstract wrappers around a working
directory under some kind of version control system.
"""

__docformat__ = 'reStructuredText'

from rtcbridge import BridgeBug
from rtcbridge.shwrap import ExternalCommandFailure
from rtcbridge.workdir import WorkingDir


class WorkspaceCreationFailure(ExternalCommandFailure):
    "Failure creating or loading the upstream workspace"


class GetPendingRevisionsFailure(ExternalCommandFailure):
    "Failure getting upstream changes"


class RevisionApplicationFailure(ExternalCommandFailure):
    "Failure applying upstream changes"


class SourceWorkingDir(WorkingDir):
    """
    This is an abstract working dir able to follow an upstream
    source of revisions.

    It has three main functionalities:

    createAndLoadWorkspace
        to extract a new copy of the sources, actually initializing
        the mechanism.

    pendingRevisions
        to query the upstream server about new revisions

    advanceTo
        to apply one of them to the working directory

    Subclasses MUST override the _underscoredMethods.
    """

    def createAndLoadWorkspace(self):
        """
        Create the upstream workspace and extract its content in the
        working directory.

        This cannot be repeated on the same workspace.
        """

        self.log.info('Creating and loading workspace in %r',
                      self.repository.basedir)
        self._createAndLoadWorkspace()

    def _createAndLoadWorkspace(self):
        raise BridgeBug("%s should override this method!" % self.__class__)

    def pendingRevisions(self):
        """
        Query the upstream repository about what happened on the
        sources since last sync, returning a list of `Revision`
        instances, oldest first.

        Nothing is cached: the upstream is asked again on each call.
        """

        revisions = list(self._getPendingRevisions())
        self.log.info('%d pending revision(s)', len(revisions))
        return revisions

    def _getPendingRevisions(self):
        raise BridgeBug("%s should override this method!" % self.__class__)

    def advanceTo(self, revision_id):
        """
        Bring the working copy up to the upstream revision `revision_id`.
        """

        self.log.info('Accepting revision %s', revision_id)
        self._advanceTo(revision_id)

    def _advanceTo(self, revision_id):
        raise BridgeBug("%s should override this method!" % self.__class__)
