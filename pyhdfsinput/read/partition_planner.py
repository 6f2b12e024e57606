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
import logging
import os
from typing import List, Optional, Sequence

from pyhdfsinput.read.partial_file import FileEntry, PartialFile

logger = logging.getLogger(__name__)

DEFAULT_NON_SPLITTABLE_EXTENSIONS = (".gz", ".bz2", ".lzo")


class FilePartitioner:
    """Splits one file into contiguous, non-overlapping byte ranges."""

    def __init__(self, path: str, length: int, num_partitions: int):
        if length <= 0:
            raise ValueError(f"Cannot partition {path} of length {length}")
        if num_partitions < 1:
            raise ValueError(f"num_partitions must be >= 1, got {num_partitions}")
        self.path = path
        self.length = length
        # every range must hold at least one byte
        self.num_partitions = min(num_partitions, length)

    def get_partial_files(self) -> List[PartialFile]:
        partial_files = []
        for i in range(self.num_partitions):
            start = i * self.length // self.num_partitions
            if i == self.num_partitions - 1:
                end = self.length
            else:
                end = (i + 1) * self.length // self.num_partitions
            partial_files.append(PartialFile(self.path, start, end))
        return partial_files


class PartitionPlanner:
    """
    Decides how many partitions each file is split into.

    The files share a byte budget of total_length / target_partition_count per
    partition; a file gets ceil(length / budget) partitions, so the resulting
    count only approximates the target. Files with a non-splittable extension,
    or all files when splitting is disabled, get one partition each. Empty
    files get none.
    """

    def __init__(self, non_splittable_extensions: Optional[Sequence[str]] = None):
        if non_splittable_extensions is None:
            non_splittable_extensions = DEFAULT_NON_SPLITTABLE_EXTENSIONS
        self.non_splittable_extensions = tuple(non_splittable_extensions)

    @staticmethod
    def resolve_partition_count(target_partition_count: int) -> int:
        if target_partition_count <= 0:
            return os.cpu_count() or 1
        return target_partition_count

    def is_splittable(self, path: str) -> bool:
        return not (self.non_splittable_extensions and path.endswith(self.non_splittable_extensions))

    def plan(self, entries: Sequence[FileEntry], target_partition_count: int,
             allow_splitting: bool = True) -> List[PartialFile]:
        total_length = sum(entry.length for entry in entries)
        num_partitions = self.resolve_partition_count(target_partition_count)
        partition_size = total_length // num_partitions

        partial_files = []
        for entry in entries:
            if entry.length <= 0:
                logger.info("Skip the 0 byte target file: %s", entry.path)
                continue

            if not allow_splitting or not self.is_splittable(entry.path):
                file_partitions = 1
            elif partition_size <= 0:
                file_partitions = 1
            else:
                file_partitions = (entry.length - 1) // partition_size + 1

            partial_files.extend(
                FilePartitioner(entry.path, entry.length, file_partitions).get_partial_files())

        return partial_files
