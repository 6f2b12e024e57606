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
import os
import shutil
import tempfile
import unittest
from unittest import mock

import pyarrow.fs
from pyarrow.fs import LocalFileSystem, S3FileSystem

from pyhdfsinput.common.exceptions import RemoteIOException
from pyhdfsinput.common.file_io import FileIO
from pyhdfsinput.common.options import Options
from pyhdfsinput.filesystem.fsspec_file_io import FsspecFileIO
from pyhdfsinput.filesystem.pyarrow_file_io import PyArrowFileIO


class PyArrowFileIOTest(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp(prefix="file_io_test_")
        os.makedirs(os.path.join(self.temp_dir, "logs", "2024"))
        for name, content in [("a.csv", b"1,2,3\n"), ("b.csv", b"4,5\n"), ("c.txt", b"")]:
            with open(os.path.join(self.temp_dir, name), "wb") as f:
                f.write(content)
        with open(os.path.join(self.temp_dir, "logs", "2024", "part-0.log"), "wb") as f:
            f.write(b"hello\n")

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_local_filesystem_path_conversion(self):
        file_io = PyArrowFileIO("file:///tmp/warehouse")
        self.assertIsInstance(file_io.arrow_filesystem, LocalFileSystem)

        self.assertEqual(file_io.to_filesystem_path("file:///tmp/path/to/file.txt"),
                         "/tmp/path/to/file.txt")
        self.assertEqual(file_io.to_filesystem_path("file:///"), "/")
        self.assertEqual(file_io.to_filesystem_path("/tmp/path/to/file.txt"),
                         "/tmp/path/to/file.txt")
        self.assertEqual(file_io.to_filesystem_path("relative/path/to/file.txt"),
                         "relative/path/to/file.txt")

        # multiple slashes are collapsed
        self.assertEqual(file_io.to_filesystem_path("file://///tmp///path///file.txt"),
                         "/tmp/path/file.txt")

        # '?' is a glob wildcard, not a query string
        self.assertEqual(file_io.to_filesystem_path("file:///tmp/data/part-?.csv"),
                         "/tmp/data/part-?.csv")

    def test_hdfs_path_conversion(self):
        file_io = PyArrowFileIO("file:///tmp/warehouse")
        self.assertEqual(file_io.to_filesystem_path("hdfs://namenode:8020/user/logs/*.gz"),
                         "/user/logs/*.gz")
        self.assertEqual(file_io.to_filesystem_path("hdfs://namenode:8020"), "/")

    def test_s3_filesystem_path_conversion(self):
        file_io = PyArrowFileIO("s3://bucket/warehouse", Options())
        self.assertIsInstance(file_io.arrow_filesystem, S3FileSystem)

        self.assertEqual(file_io.to_filesystem_path("s3://my-bucket/path/to/file.txt"),
                         "my-bucket/path/to/file.txt")
        self.assertEqual(file_io.to_filesystem_path("s3://my-bucket"), "my-bucket")
        self.assertEqual(file_io.to_filesystem_path("s3:///path/to/file.txt"), "path/to/file.txt")
        self.assertEqual(file_io.to_filesystem_path("s3:///"), ".")
        self.assertEqual(file_io.to_qualified_path("my-bucket/path/to/file.txt"),
                         "s3://my-bucket/path/to/file.txt")

    def test_qualified_paths(self):
        self.assertEqual(PyArrowFileIO("file:///tmp").to_qualified_path("/tmp/a.csv"),
                         "file:///tmp/a.csv")
        self.assertEqual(PyArrowFileIO("/tmp").to_qualified_path("/tmp/a.csv"), "/tmp/a.csv")

    def test_glob_status(self):
        file_io = FileIO.get(f"file://{self.temp_dir}")

        statuses = sorted(file_io.glob_status(f"file://{self.temp_dir}/*.csv"), key=lambda s: s.path)

        self.assertEqual([s.path for s in statuses],
                         [f"file://{self.temp_dir}/a.csv", f"file://{self.temp_dir}/b.csv"])
        self.assertEqual([s.size for s in statuses], [6, 4])
        self.assertTrue(all(s.is_file() for s in statuses))

    def test_glob_status_without_match(self):
        file_io = FileIO.get(self.temp_dir)
        self.assertEqual(file_io.glob_status(f"{self.temp_dir}/missing.csv"), [])
        self.assertEqual(file_io.glob_status(f"{self.temp_dir}/*.json"), [])

    def test_list_status(self):
        file_io = FileIO.get(self.temp_dir)

        statuses = {s.path: s for s in file_io.list_status(self.temp_dir)}

        self.assertEqual(set(statuses), {
            os.path.join(self.temp_dir, name) for name in ("a.csv", "b.csv", "c.txt", "logs")
        })
        self.assertTrue(statuses[os.path.join(self.temp_dir, "logs")].is_dir())
        self.assertEqual(statuses[os.path.join(self.temp_dir, "c.txt")].size, 0)

    def test_new_input_stream(self):
        file_io = FileIO.get(self.temp_dir)
        with file_io.new_input_stream(os.path.join(self.temp_dir, "logs", "2024", "part-0.log")) as stream:
            self.assertEqual(stream.read(), b"hello\n")

    def test_open_missing_file(self):
        file_io = FileIO.get(self.temp_dir)
        with self.assertRaises(RemoteIOException):
            file_io.new_input_stream(os.path.join(self.temp_dir, "missing.csv"))

    def test_hdfs_requires_hadoop_home(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(RuntimeError):
                PyArrowFileIO("hdfs://namenode:8020/user/logs", Options())

    def test_unknown_scheme(self):
        with self.assertRaises(ValueError):
            FileIO.get("ftp://host/data/*.csv")


class FsspecFileIOTest(unittest.TestCase):

    def test_memory_scheme(self):
        self.assertIsInstance(FileIO.get("memory:///data/*.csv"), FsspecFileIO)

    def test_remote_errors_are_wrapped(self):
        filesystem = mock.Mock()
        filesystem.glob.side_effect = OSError("namenode unreachable")
        filesystem.ls.side_effect = ConnectionError("connection reset")
        filesystem.open.side_effect = PermissionError("permission denied")
        file_io = FsspecFileIO(filesystem)

        with self.assertRaises(RemoteIOException) as context:
            file_io.glob_status("hdfs://nn:8020/data/*")
        self.assertEqual(context.exception.path, "hdfs://nn:8020/data/*")
        self.assertIsInstance(context.exception.__cause__, OSError)

        with self.assertRaises(RemoteIOException):
            file_io.list_status("hdfs://nn:8020/data")
        with self.assertRaises(RemoteIOException):
            file_io.new_input_stream("hdfs://nn:8020/data/a.csv")

    def test_file_status_mapping(self):
        filesystem = mock.Mock()
        filesystem.unstrip_protocol.side_effect = lambda name: f"memory://{name}"
        filesystem.ls.return_value = [
            {"name": "/d/a", "size": 3, "type": "file"},
            {"name": "/d/sub", "size": 0, "type": "directory"},
            {"name": "/d/link", "size": 0, "type": "other"},
        ]

        statuses = FsspecFileIO(filesystem).list_status("memory:///d")

        self.assertEqual([s.path for s in statuses], ["memory:///d/a", "memory:///d/sub", "memory:///d/link"])
        self.assertEqual([s.type for s in statuses], [
            pyarrow.fs.FileType.File,
            pyarrow.fs.FileType.Directory,
            pyarrow.fs.FileType.Unknown,
        ])


if __name__ == '__main__':
    unittest.main()
