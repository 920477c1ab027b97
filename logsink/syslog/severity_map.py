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

import attr
import pyrsistent

from logsink.errors import ConfigurationError
from logsink.levels import Level, level_name, level_num
from logsink.syslog import Priority, resolve_priority


DEFAULT_MAPPING = pyrsistent.pmap(
    {
        Level.debug: Priority.DEBUG,
        Level.info: Priority.INFO,
        Level.warn: Priority.WARNING,
        Level.error: Priority.ERR,
        Level.fatal: Priority.CRIT,
    }
)


@attr.s(slots=True, frozen=True)
class SeverityMap:
    """
    Maps the framework's levels onto syslog priorities. Instances are immutable, a
    new mapping always replaces the old one wholesale.
    """

    _table = attr.ib(default=DEFAULT_MAPPING, converter=pyrsistent.pmap)

    @classmethod
    def from_mapping(cls, entries):
        table = {}
        for level, priority in dict(entries).items():
            table[level_num(level)] = resolve_priority(priority)
        return cls(table)

    def set_mapping(self, entries):
        return self.from_mapping(entries)

    def priority_for(self, level) -> Priority:
        try:
            return self._table[level]
        except KeyError:
            raise ConfigurationError(
                f"no syslog priority configured for level {_describe(level)}"
            ) from None

    def __iter__(self):
        return iter(sorted(self._table.items()))

    def __len__(self):
        return len(self._table)


def _describe(level):
    try:
        return level_name(level)
    except ConfigurationError:
        return repr(level)
