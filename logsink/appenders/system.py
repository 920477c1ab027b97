# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging

import attr

from logsink.appender import Appender
from logsink.errors import ConfigurationError
from logsink.event import LogEvent
from logsink.syslog import (
    Facility,
    LogOption,
    Priority,
    resolve_facility,
    resolve_logopt,
)
from logsink.syslog.connection import SyslogConnection
from logsink.syslog.severity_map import SeverityMap


logger = logging.getLogger(__name__)


DEFAULT_LOGOPT = LogOption.PID | LogOption.CONS
DEFAULT_FACILITY = Facility.USER


def _validate_ident(instance, attribute, value):
    if not isinstance(value, str):
        raise ConfigurationError(f"ident must be a string, not {value!r}")


@attr.s(slots=True, frozen=True)
class AppenderConfig:

    ident = attr.ib(type=str, validator=_validate_ident)
    logopt = attr.ib(type=LogOption, default=DEFAULT_LOGOPT, converter=resolve_logopt)
    facility = attr.ib(
        type=Facility, default=DEFAULT_FACILITY, converter=resolve_facility
    )


class SyslogAppender(Appender):
    """
    An appender that writes to the UNIX syslog daemon.

    Options:

    ``ident``
        String prepended to every message, defaults to the appender's name.

    ``logopt``
        Options used when opening the connection, formed by OR'ing ``LogOption``
        values (``CONS``, ``NDELAY``, ``PERROR``, ``PID``, ...). Names such as
        ``"PID|CONS"`` are accepted as well. Defaults to ``PID | CONS``.

    ``facility``
        The facility assigned to every message, either a ``Facility``, its numeric
        value, or a name such as ``"daemon"`` or ``"LOG_LOCAL0"``. Defaults to
        ``USER``.

    ``map``
        Overrides the mapping of levels to syslog priorities, for example
        ``{"debug": "LOG_ERR", "info": "info"}``. Levels missing from the mapping
        can not be written.
    """

    def __init__(
        self,
        name,
        *,
        ident=None,
        logopt=None,
        facility=None,
        map=None,
        layout=None,
        level=None,
        connection_factory=None,
    ):
        config = {"ident": name if ident is None else ident}
        if logopt is not None:
            config["logopt"] = logopt
        if facility is not None:
            config["facility"] = facility
        self.config = AppenderConfig(**config)

        self._severity_map = (
            SeverityMap() if map is None else SeverityMap.from_mapping(map)
        )

        if connection_factory is None:
            connection_factory = SyslogConnection.open
        self._connection_factory = connection_factory
        self._connection = self._open_connection()

        try:
            super().__init__(name, layout=layout, level=level)
        except Exception:
            self._connection.close()
            raise

    @property
    def map(self):
        return self._severity_map

    @map.setter
    def map(self, entries):
        self._severity_map = SeverityMap.from_mapping(entries)

    def set_mapping(self, entries):
        self.map = entries
        return self

    @property
    def closed(self):
        return not self._connection.is_open

    def close(self, footer=True):
        super().close(footer)

        with self._lock:
            if self._connection.is_open:
                self._connection.close()
        return self

    def reopen(self):
        with self._lock:
            if self._connection.is_open:
                self.flush()
                self._connection.close()
            self._connection = self._open_connection()

        logger.debug("Reopened %r", self)
        return super().reopen()

    def _open_connection(self):
        return self._connection_factory(
            self.config.ident, self.config.logopt, self.config.facility
        )

    def _write(self, event):
        if isinstance(event, LogEvent):
            priority = self._severity_map.priority_for(event.level)
            message = self.layout.format(event)
        else:
            priority = Priority.DEBUG
            message = str(event)

        if not message:
            return self

        # Only the connection is guarded, the layout may itself log.
        with self._lock:
            self._connection.emit(priority, message)
        return self
