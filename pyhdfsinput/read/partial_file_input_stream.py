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
import io
from typing import Optional

from pyhdfsinput.common.exceptions import RemoteIOException

SKIP_BUFFER_SIZE = 1024 * 1024


class PartialFileInputStream(io.RawIOBase):
    """
    Exposes only the bytes [start, end) of an underlying stream that is
    positioned at offset 0. Positions reported by tell() and accepted by
    seek() are offsets into the file, limited to [start, end].

    Closing this stream closes the underlying one.
    """

    def __init__(self, original, start: int, end: int, path: Optional[str] = None):
        super().__init__()
        if start < 0 or end < start:
            raise ValueError(f"Invalid range [{start}, {end})")
        self._original = original
        self._start = start
        self._end = end
        self._path = path
        self._position = 0
        self._skip_to(start)

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def _original_seekable(self) -> bool:
        seekable = getattr(self._original, "seekable", None)
        return bool(seekable()) if callable(seekable) else False

    def _skip_to(self, target: int):
        try:
            if self._original_seekable():
                self._original.seek(target)
                self._position = target
                return
            if target < self._position:
                raise ValueError("Cannot move backwards on a non-seekable stream")
            while self._position < target:
                skipped = self._original.read(min(SKIP_BUFFER_SIZE, target - self._position))
                if not skipped:
                    # source is shorter than start; nothing left to read
                    self._position = self._end
                    return
                self._position += len(skipped)
        except OSError as e:
            raise RemoteIOException(self._path or repr(self._original), e) from e

    def _check_not_closed(self):
        if self.closed:
            raise ValueError("I/O operation on closed file.")

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        self._check_not_closed()
        remaining = self._end - self._position
        if remaining <= 0 or len(b) == 0:
            return 0

        try:
            data = self._original.read(min(len(b), remaining))
        except OSError as e:
            raise RemoteIOException(self._path or repr(self._original), e) from e
        if not data:
            return 0

        n = len(data)
        b[:n] = data
        self._position += n
        return n

    def seekable(self) -> bool:
        return self._original_seekable()

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._check_not_closed()
        if whence == io.SEEK_SET:
            target = offset
        elif whence == io.SEEK_CUR:
            target = self._position + offset
        elif whence == io.SEEK_END:
            target = self._end + offset
        else:
            raise ValueError(f"Invalid whence: {whence}")

        if target < self._start or target > self._end:
            raise ValueError(f"Position {target} is outside of [{self._start}, {self._end}]")
        if target != self._position:
            self._skip_to(target)
        return self._position

    def tell(self) -> int:
        self._check_not_closed()
        return self._position

    def close(self):
        if not self.closed:
            try:
                self._original.close()
            finally:
                super().close()
