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
import uuid
from collections import defaultdict

import fsspec

from pyhdfsinput.common.exceptions import PathNotFoundException, RemoteIOException
from pyhdfsinput.common.file_io import FileIO
from pyhdfsinput.common.options import Options
from pyhdfsinput.plugin.hdfs_file_input_plugin import HdfsFileInputPlugin
from pyhdfsinput.read.partial_file import PartialFile
from pyhdfsinput.read.task_source import TaskSource


class RecordingControl:

    def __init__(self):
        self.calls = []

    def __call__(self, task_source: TaskSource, task_count: int):
        # tasks receive the task source the way a remote worker would
        self.calls.append((TaskSource.from_json(task_source.to_json()), task_count))
        return [{} for _ in range(task_count)]


class HdfsFileInputPluginTest(unittest.TestCase):

    def setUp(self):
        self.fs = fsspec.filesystem("memory")
        self.root = f"/hdfs-file-input-{uuid.uuid4().hex}"
        self.plugin = HdfsFileInputPlugin()
        self.control = RecordingControl()

    def tearDown(self):
        try:
            self.fs.rm(self.root, recursive=True)
        except FileNotFoundError:
            pass

    def uri(self, relative: str) -> str:
        return f"memory://{self.root}/{relative}"

    def write(self, relative: str, data: bytes):
        self.fs.pipe_file(f"{self.root}/{relative}", data)

    def read_all(self, task_source: TaskSource):
        """Read every task and reassemble the files from their partial files."""
        parts = defaultdict(list)
        for task_index in range(task_source.task_count()):
            partial_file = task_source.get_file(task_index)
            with self.plugin.open(task_source, task_index) as stream:
                parts[partial_file.path].append((partial_file.start, stream.read()))
        return {path: b"".join(data for _, data in sorted(chunks)) for path, chunks in parts.items()}

    def test_transaction(self):
        self.write("a", b"")
        self.write("b", bytes(range(100)))
        self.write("c.gz", b"z" * 50)
        options = Options({"path": self.uri("*"), "num_partitions": 3})

        with self.assertLogs("pyhdfsinput.plugin.hdfs_file_input_plugin", level="INFO") as logs:
            config_diff = self.plugin.transaction(options, self.control)

        self.assertEqual(config_diff, {})
        self.assertEqual(len(self.control.calls), 1)
        task_source, task_count = self.control.calls[0]
        self.assertEqual(task_count, 3)
        self.assertEqual(sorted(task_source.files, key=lambda p: (p.path, p.start)), [
            PartialFile(self.uri("b"), 0, 50),
            PartialFile(self.uri("b"), 50, 100),
            PartialFile(self.uri("c.gz"), 0, 50),
        ])
        self.assertTrue(any("task size: 3" in line for line in logs.output))
        self.assertTrue(any(f"target file: {self.uri('b')}, start: 50, end: 100" in line for line in logs.output))

        self.assertEqual(self.read_all(task_source), {
            self.uri("b"): bytes(range(100)),
            self.uri("c.gz"): b"z" * 50,
        })

    def test_partitions_of_one_file_are_disjoint(self):
        data = os.urandom(700)
        self.write("logs/part-0", data)
        options = Options({"path": self.uri("logs"), "num_partitions": 7})

        task_source = self.plugin.plan(options)

        self.assertEqual(task_source.task_count(), 7)
        self.assertEqual(self.read_all(task_source), {self.uri("logs/part-0"): data})

    def test_splitting_disabled(self):
        self.write("x.csv", b"x" * 100)
        self.write("y.csv", b"y" * 100)
        options = Options({"path": self.uri("*.csv"), "num_partitions": 8, "partition": False})

        task_source = self.plugin.plan(options)

        self.assertEqual(sorted(task_source.files, key=lambda p: p.path), [
            PartialFile(self.uri("x.csv"), 0, 100),
            PartialFile(self.uri("y.csv"), 0, 100),
        ])

    def test_nothing_matched(self):
        with self.assertRaises(PathNotFoundException):
            self.plugin.transaction(Options({"path": self.uri("*.csv")}), self.control)
        self.assertEqual(self.control.calls, [])

    def test_only_empty_files(self):
        self.write("a.csv", b"")
        self.write("b.csv", b"")

        with self.assertRaises(PathNotFoundException):
            self.plugin.transaction(Options({"path": self.uri("*.csv")}), self.control)
        self.assertEqual(self.control.calls, [])

    def test_path_is_required(self):
        with self.assertRaises(ValueError):
            self.plugin.transaction(Options(), self.control)

    def test_open_out_of_range(self):
        self.write("a.csv", b"abc")
        task_source = self.plugin.plan(Options({"path": self.uri("a.csv"), "num_partitions": 1}))

        with self.assertRaises(IndexError):
            self.plugin.open(task_source, 1)

    def test_open_vanished_file(self):
        self.write("a.csv", b"abc")
        task_source = self.plugin.plan(Options({"path": self.uri("a.csv"), "num_partitions": 1}))
        self.fs.rm_file(f"{self.root}/a.csv")

        with self.assertRaises(RemoteIOException):
            self.plugin.open(task_source, 0)

    def test_file_io_built_from_task_options(self):
        self.write("a.csv", b"abc")
        requested = []

        def factory(path: str, options: Options) -> FileIO:
            requested.append((path, options.to_map()))
            return FileIO.get(path, options)

        plugin = HdfsFileInputPlugin(factory)
        task_source = plugin.plan(Options({"path": self.uri("a.csv"), "config.dfs.replication": "2"}))
        with plugin.open(task_source, 0) as stream:
            self.assertEqual(stream.read(), b"abc")

        self.assertEqual(len(requested), 2)
        self.assertEqual(requested[1], (self.uri("a.csv"), {
            "path": self.uri("a.csv"), "config.dfs.replication": "2"}))

    def test_resume_and_cleanup(self):
        task_source = TaskSource(options={}, files=[PartialFile("memory:///x", 0, 1)])

        self.assertEqual(self.plugin.resume(task_source, 1, self.control), {})
        self.assertEqual(self.control.calls[0][1], 1)
        self.plugin.cleanup(task_source, 1, [{}])


class LocalHdfsFileInputPluginTest(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp(prefix="hdfs_file_input_")
        self.plugin = HdfsFileInputPlugin()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_directory_on_local_filesystem(self):
        os.makedirs(os.path.join(self.temp_dir, "logs", "sub"))
        contents = {
            os.path.join(self.temp_dir, "logs", "part-0.log"): b"".join(b"line %d\n" % i for i in range(200)),
            os.path.join(self.temp_dir, "logs", "sub", "part-1.log"): b"".join(b"row %d\n" % i for i in range(50)),
            os.path.join(self.temp_dir, "logs", "sub", "empty.log"): b"",
        }
        for path, content in contents.items():
            with open(path, "wb") as f:
                f.write(content)
        control = RecordingControl()

        self.plugin.transaction(Options({"path": os.path.join(self.temp_dir, "logs"), "num_partitions": 4}),
                                control)

        task_source, task_count = control.calls[0]
        self.assertEqual(task_count, task_source.task_count())
        self.assertNotIn(os.path.join(self.temp_dir, "logs", "sub", "empty.log"),
                         [p.path for p in task_source.files])

        parts = defaultdict(list)
        for task_index in range(task_count):
            partial_file = task_source.get_file(task_index)
            with self.plugin.open(task_source, task_index) as stream:
                data = stream.read()
            self.assertEqual(len(data), partial_file.end - partial_file.start)
            parts[partial_file.path].append((partial_file.start, data))

        for path, content in contents.items():
            if not content:
                continue
            self.assertEqual(b"".join(data for _, data in sorted(parts[path])), content)


if __name__ == '__main__':
    unittest.main()
