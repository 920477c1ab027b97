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

import pytest

from hypothesis import given, strategies as st

from logsink.errors import ConfigurationError, InvalidPriorityError
from logsink.levels import LEVEL_NAMES, Level
from logsink.syslog import PRIORITY_NAMES, Priority
from logsink.syslog.severity_map import SeverityMap

from ...strategies import cased


@pytest.mark.parametrize(
    ("level", "priority"),
    [
        (Level.debug, Priority.DEBUG),
        (Level.info, Priority.INFO),
        (Level.warn, Priority.WARNING),
        (Level.error, Priority.ERR),
        (Level.fatal, Priority.CRIT),
    ],
)
def test_default_mapping(level, priority):
    severity_map = SeverityMap()
    assert severity_map.priority_for(level) is priority
    assert severity_map.priority_for(int(level)) is priority


def test_default_covers_every_level():
    assert len(SeverityMap()) == len(Level)
    assert [level for level, _ in SeverityMap()] == list(Level)


def test_set_mapping_resolves_symbolic_names():
    severity_map = SeverityMap().set_mapping({"debug": "LOG_ERR"})
    assert severity_map.priority_for(Level.debug) is Priority.ERR


def test_set_mapping_replaces_wholesale():
    original = SeverityMap()
    replaced = original.set_mapping({"debug": "LOG_ERR"})

    # No partial merge with the previous table, and the original is untouched.
    assert len(replaced) == 1
    with pytest.raises(ConfigurationError):
        replaced.priority_for(Level.info)
    assert original.priority_for(Level.debug) is Priority.DEBUG


@given(
    st.dictionaries(
        cased(LEVEL_NAMES) | st.sampled_from(list(Level)),
        cased(PRIORITY_NAMES) | st.sampled_from(list(Priority)),
    )
)
def test_from_mapping(entries):
    severity_map = SeverityMap.from_mapping(entries)

    expected = {}
    for level, priority in entries.items():
        level = LEVEL_NAMES[level.upper()] if isinstance(level, str) else level
        if isinstance(priority, str):
            priority = PRIORITY_NAMES[priority.upper()]
        expected[level] = priority

    assert dict(severity_map) == expected
    for level in Level:
        if level in expected:
            assert severity_map.priority_for(level) is expected[level]
        else:
            with pytest.raises(ConfigurationError):
                severity_map.priority_for(level)


@pytest.mark.parametrize("level", ["verbose", 9, None])
def test_invalid_level(level):
    with pytest.raises(ConfigurationError):
        SeverityMap.from_mapping({level: "info"})


@pytest.mark.parametrize("priority", ["loud", 12, None, 2.5])
def test_invalid_priority(priority):
    with pytest.raises(InvalidPriorityError):
        SeverityMap.from_mapping({"info": priority})


def test_unknown_ordinal():
    with pytest.raises(ConfigurationError):
        SeverityMap().priority_for(17)


def test_equality():
    assert SeverityMap() == SeverityMap.from_mapping(
        {
            "debug": "debug",
            "info": "info",
            "warn": "warning",
            "error": "err",
            "fatal": "crit",
        }
    )
