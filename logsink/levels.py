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

import enum

from logsink.errors import ConfigurationError


@enum.unique
class Level(enum.IntEnum):
    debug = 0
    info = 1
    warn = 2
    error = 3
    fatal = 4


LEVEL_NAMES = {level.name.upper(): level for level in Level}


def level_num(value):
    """
    Resolves ``value`` to the canonical ``Level``. Accepts a ``Level``, its integer
    ordinal, or a case-insensitive level name such as ``"warn"`` or ``"WARN"``.
    """
    # bool is an int subclass, but True/False are never meant as a level.
    if isinstance(value, bool):
        raise ConfigurationError(f"unknown level {value!r}")

    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            raise ConfigurationError(f"unknown level {value!r}") from None

    if isinstance(value, str):
        try:
            return LEVEL_NAMES[value.strip().upper()]
        except KeyError:
            raise ConfigurationError(f"unknown level {value!r}") from None

    raise ConfigurationError(f"unknown level {value!r}")


def level_name(value):
    return level_num(value).name.upper()
