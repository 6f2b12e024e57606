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
from typing import Dict, List

from pyhdfsinput.common.json_util import JSON, json_field
from pyhdfsinput.common.options import Options
from pyhdfsinput.read.partial_file import PartialFile


@dataclass
class TaskSource:
    """Everything a task needs to read its partial file, shipped as JSON."""
    options: Dict[str, str] = json_field("options", default_factory=dict)
    files: List[PartialFile] = json_field("files", default_factory=list)

    def task_count(self) -> int:
        return len(self.files)

    def get_options(self) -> Options:
        return Options(dict(self.options))

    def get_file(self, task_index: int) -> PartialFile:
        if task_index < 0 or task_index >= len(self.files):
            raise IndexError(f"Task index {task_index} is out of range [0, {len(self.files)})")
        return self.files[task_index]

    def to_json(self) -> str:
        return JSON.to_json(self)

    @staticmethod
    def from_json(json_str: str) -> 'TaskSource':
        return JSON.from_json(json_str, TaskSource)
