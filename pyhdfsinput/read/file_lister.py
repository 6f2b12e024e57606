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
from typing import List, Set

from pyhdfsinput.common.exceptions import PathNotFoundException
from pyhdfsinput.common.file_io import FileIO, FileStatus
from pyhdfsinput.read.partial_file import FileEntry

logger = logging.getLogger(__name__)


class FileLister:
    """Expands a glob root into the files below it, recursing into directories."""

    def __init__(self, file_io: FileIO):
        self.file_io = file_io

    def list(self, glob_root: str) -> List[FileEntry]:
        """
        List every file matched by glob_root. Matched directories are walked
        depth-first. The order is the filesystem's listing order.

        Raises:
            PathNotFoundException: If nothing matches glob_root.
            RemoteIOException: If the filesystem cannot be listed.
        """
        entries = []
        seen = set()
        # glob may answer None rather than raise for a missing literal path
        for status in self.file_io.glob_status(glob_root) or []:
            self._collect(status, entries, seen)

        if not entries:
            raise PathNotFoundException(glob_root)

        logger.debug("Listed %d files under %s", len(entries), glob_root)
        return entries

    def _collect(self, status: FileStatus, entries: List[FileEntry], seen: Set[str]):
        if status.is_dir():
            for child in self.file_io.list_status(status.path):
                self._collect(child, entries, seen)
        elif status.path not in seen:
            # a recursive glob also matches files below matched directories
            seen.add(status.path)
            entries.append(FileEntry(status.path, status.size or 0))
