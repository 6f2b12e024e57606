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

from typing import Optional


class FileInputException(Exception):
    """Base file input exception"""


class PathNotFoundException(FileInputException):
    """No file to read was found for a path"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path {path} does not exist or matched no non-empty files")


class RemoteIOException(FileInputException):
    """Talking to the filesystem failed"""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Failed to access {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
