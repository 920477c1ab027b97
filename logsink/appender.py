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
import threading

from logsink.errors import AppenderClosedError, ConfigurationError
from logsink.event import LogEvent
from logsink.layouts import BasicLayout, Layout
from logsink.levels import Level, level_num


logger = logging.getLogger(__name__)


class Registry:
    def __init__(self):
        self._appenders = {}
        self._lock = threading.Lock()

    def register(self, appender):
        with self._lock:
            self._appenders[appender.name] = appender
        logger.debug("Registered appender %r", appender.name)
        return appender

    def get(self, name):
        with self._lock:
            return self._appenders.get(name)

    def remove(self, name, appender=None):
        """
        Removes the appender registered as ``name``. When ``appender`` is given, only
        removes it if it is still the one registered under that name.
        """
        with self._lock:
            if appender is not None and self._appenders.get(name) is not appender:
                return None
            appender = self._appenders.pop(name, None)
        if appender is not None:
            logger.debug("Removed appender %r", name)
        return appender

    def clear(self):
        with self._lock:
            self._appenders.clear()

    def __contains__(self, name):
        with self._lock:
            return name in self._appenders

    def __iter__(self):
        with self._lock:
            return iter(list(self._appenders))

    def __len__(self):
        with self._lock:
            return len(self._appenders)


registry = Registry()


class Appender:
    """
    The base of every sink in the framework.

    Subclasses implement ``_write``, which receives either a ``LogEvent`` or a raw
    value, and may override ``close``, ``closed``, ``reopen`` and ``flush`` to manage
    whatever resource they write to. ``self._lock`` guards access to that resource.
    """

    def __init__(self, name, *, layout=None, level=None):
        if not isinstance(name, str) or not name:
            raise ConfigurationError(
                f"appender name must be a non-empty string, not {name!r}"
            )
        if layout is None:
            layout = BasicLayout()
        if not isinstance(layout, Layout):
            raise ConfigurationError(f"{layout!r} is not a Layout")

        self.name = name
        self.layout = layout
        self.level = Level.debug if level is None else level_num(level)

        self._closed = False
        self._lock = threading.RLock()

        registry.register(self)

    def __repr__(self):
        return f"<{type(self).__name__}: {self.name}>"

    @property
    def closed(self):
        return self._closed

    def append(self, event: LogEvent):
        if self._closed:
            raise AppenderClosedError(f"appender {self!r} is closed")

        if event.level >= self.level:
            self._write(event)
        return self

    def append_raw(self, value):
        if self._closed:
            raise AppenderClosedError(f"appender {self!r} is closed")

        self._write(value)
        return self

    def close(self, footer=True):
        if self._closed:
            return self

        registry.remove(self.name, self)
        self._closed = True
        self.flush()

        if footer:
            text = self.layout.footer()
            if text:
                try:
                    self._write(text)
                except Exception:
                    logger.error("Unable to write footer to %r", self, exc_info=True)

        return self

    def reopen(self):
        self._closed = False
        return self

    def flush(self):
        return self

    def _write(self, event):
        raise NotImplementedError
