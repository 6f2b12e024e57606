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

from dataclasses import dataclass

from pyhdfsinput.common.json_util import json_field


@dataclass(frozen=True)
class FileEntry:
    """A listed file and its byte length at listing time."""
    path: str
    length: int


@dataclass(frozen=True)
class PartialFile:
    """The byte range [start, end) of one file, read by exactly one task."""
    path: str = json_field("path")
    start: int = json_field("start")
    end: int = json_field("end")

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start} for {self.path}")
        if self.end <= self.start:
            raise ValueError(f"end must be > start, got [{self.start}, {self.end}) for {self.path}")

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self):
        return f"{self.path}[{self.start}, {self.end})"
