################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
# limitations under the License.
################################################################################

from datetime import datetime, timedelta
from typing import Optional


def resolve_path(pattern: str, rewind_seconds: int = 0, now: Optional[datetime] = None) -> str:
    """
    Resolve strftime directives in a path pattern against the local time
    rewound by rewind_seconds, e.g. '/logs/%Y%m%d/*' -> '/logs/20240101/*'.
    """
    if pattern is None:
        raise ValueError("pattern cannot be None")
    if '%' not in pattern:
        return pattern

    if now is None:
        now = datetime.now()
    return (now - timedelta(seconds=rewind_seconds)).strftime(pattern)
