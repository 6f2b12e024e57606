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
from typing import Any, Dict, List, Optional

import pyarrow.fs
from fsspec import AbstractFileSystem

from pyhdfsinput.common.exceptions import RemoteIOException
from pyhdfsinput.common.file_io import FileIO, FileStatus


class FsspecFileIO(FileIO):
    """
    FileIO on top of an fsspec filesystem.
    """

    def __init__(self, filesystem: AbstractFileSystem):
        self.filesystem = filesystem
        self.logger = logging.getLogger(__name__)

    def to_filesystem_path(self, path: str) -> str:
        return path

    def to_qualified_path(self, name: str) -> str:
        return self.filesystem.unstrip_protocol(name)

    def glob_status(self, pattern: str) -> Optional[List[FileStatus]]:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Invoking glob_status for {pattern}")

        path_str = self.to_filesystem_path(pattern)
        try:
            infos = self.filesystem.glob(path_str, detail=True)
        except OSError as e:
            raise RemoteIOException(pattern, e) from e
        return [self._to_file_status(info) for info in infos.values()]

    def list_status(self, path: str) -> List[FileStatus]:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Invoking list_status for {path}")

        path_str = self.to_filesystem_path(path)
        try:
            infos = self.filesystem.ls(path_str, detail=True)
        except OSError as e:
            raise RemoteIOException(path, e) from e
        return [self._to_file_status(info) for info in infos]

    def get_file_status(self, path: str) -> FileStatus:
        path_str = self.to_filesystem_path(path)
        try:
            return self._to_file_status(self.filesystem.info(path_str))
        except OSError as e:
            raise RemoteIOException(path, e) from e

    def new_input_stream(self, path: str):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Invoking new_input_stream for {path}")

        path_str = self.to_filesystem_path(path)
        try:
            return self.filesystem.open(path_str, "rb")
        except OSError as e:
            raise RemoteIOException(path, e) from e

    def _to_file_status(self, info: Dict[str, Any]) -> FileStatus:
        info_type = info.get("type")
        if info_type == "directory":
            file_type = pyarrow.fs.FileType.Directory
        elif info_type == "file":
            file_type = pyarrow.fs.FileType.File
        else:
            file_type = pyarrow.fs.FileType.Unknown
        return FileStatus(
            path=self.to_qualified_path(info["name"]),
            size=info.get("size"),
            type=file_type,
        )
