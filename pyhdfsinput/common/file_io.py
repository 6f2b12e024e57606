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
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, List, Optional
from urllib.parse import urlparse

import pyarrow.fs

from pyhdfsinput.common.options import Options


@dataclass(frozen=True)
class FileStatus:
    path: str
    size: Optional[int]
    type: pyarrow.fs.FileType

    def is_dir(self) -> bool:
        return self.type == pyarrow.fs.FileType.Directory

    def is_file(self) -> bool:
        return self.type == pyarrow.fs.FileType.File


class FileIO(ABC):
    """
    Read-only access to a filesystem with glob and directory semantics.

    Paths returned in FileStatus are fully qualified and can be passed back
    to any method of the same FileIO.
    """

    @abstractmethod
    def glob_status(self, pattern: str) -> Optional[List[FileStatus]]:
        """
        Expand a glob pattern. May return None instead of an empty list when a
        literal (non-wildcard) path does not exist.
        """

    @abstractmethod
    def list_status(self, path: str) -> List[FileStatus]:
        """Direct children of a directory."""

    @abstractmethod
    def new_input_stream(self, path: str) -> BinaryIO:
        """Open a file for sequential binary reading, positioned at offset 0."""

    @staticmethod
    def get(path: str, options: Optional[Options] = None) -> 'FileIO':
        """Create the FileIO serving the scheme of path."""
        options = options or Options.from_none()
        scheme = urlparse(path).scheme
        if scheme == "memory":
            import fsspec
            from pyhdfsinput.filesystem.fsspec_file_io import FsspecFileIO

            return FsspecFileIO(fsspec.filesystem("memory"))

        from pyhdfsinput.filesystem.pyarrow_file_io import PyArrowFileIO

        return PyArrowFileIO(path, options)
