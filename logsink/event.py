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

import arrow
import attr
import attr.validators

from logsink.levels import Level, level_num


@attr.s(slots=True, frozen=True)
class LogEvent:

    logger = attr.ib(type=str, validator=attr.validators.instance_of(str))
    level = attr.ib(type=Level, converter=level_num)
    data = attr.ib()
    time = attr.ib(
        type=arrow.Arrow,
        factory=arrow.utcnow,
        validator=attr.validators.instance_of(arrow.Arrow),
    )
