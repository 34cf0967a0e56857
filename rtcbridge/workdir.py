# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Abstract working directory
# :Creato:   sab 17 ott 2026 10:58:44 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

__docformat__ = 'reStructuredText'


class WorkingDir(object):
    """
    This is the common ancestor for working directories, associated
    to some kind of repository.
    """

    def __init__(self, repository):
        from logging import getLogger

        self.repository = repository
        self.log = getLogger('rtcbridge.%s.%s' % (self.__class__.__name__,
                                                  repository.which))

    def _run(self, cmd, failure, **kwargs):
        """
        Execute `cmd` in the repository base directory, raising `failure`
        when it exits with a status not listed in `ok_status`.

        Return the captured standard output as a string.
        """

        from rtcbridge.shwrap import ExternalCommand, PIPE

        c = ExternalCommand(cwd=self.repository.basedir, command=cmd,
                            ok_status=kwargs.pop('ok_status', None),
                            secrets=kwargs.pop('secrets', None))
        out, err = c.execute(stdout=PIPE, stderr=PIPE)
        if not c.isOk():
            msg = "%s returned status %s" % (str(c), c.exit_status)
            if err is not None:
                details = err.read().strip()
                if details:
                    msg += " saying\n" + details
            raise failure(msg)
        return out is not None and out.read() or ''
