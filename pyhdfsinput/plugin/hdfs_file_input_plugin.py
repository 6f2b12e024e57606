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
from typing import Any, Callable, Dict, List, Optional

from pyhdfsinput.common.exceptions import PathNotFoundException, RemoteIOException
from pyhdfsinput.common.file_io import FileIO
from pyhdfsinput.common.options import Options
from pyhdfsinput.common.options.input_options import HdfsInputOptions
from pyhdfsinput.common.time_utils import resolve_path
from pyhdfsinput.read.file_lister import FileLister
from pyhdfsinput.read.partial_file_input_stream import PartialFileInputStream
from pyhdfsinput.read.partition_planner import PartitionPlanner
from pyhdfsinput.read.task_source import TaskSource

logger = logging.getLogger(__name__)

# control(task_source, task_count) runs the tasks and returns their reports
Control = Callable[[TaskSource, int], Optional[List[Dict[str, Any]]]]


class HdfsFileInputPlugin:
    """
    Lists the files matching the configured path, splits them into partial
    files and opens one partial file per task.
    """

    def __init__(self, file_io_factory: Callable[[str, Options], FileIO] = FileIO.get):
        self.file_io_factory = file_io_factory

    def transaction(self, options: Options, control: Control) -> Dict[str, Any]:
        task_source = self.plan(options)
        return self.resume(task_source, task_source.task_count(), control)

    def plan(self, options: Options) -> TaskSource:
        path = resolve_path(options.get_required(HdfsInputOptions.PATH),
                            options.get(HdfsInputOptions.REWIND_SECONDS))
        file_io = self.file_io_factory(path, options)

        try:
            entries = FileLister(file_io).list(path)
        except RemoteIOException as e:
            logger.error(str(e))
            raise
        logger.info("Loading target files: %s", [entry.path for entry in entries])

        planner = PartitionPlanner(HdfsInputOptions.non_splittable_extensions(options))
        partial_files = planner.plan(entries,
                                     options.get(HdfsInputOptions.NUM_PARTITIONS),
                                     options.get(HdfsInputOptions.PARTITION))
        if not partial_files:
            raise PathNotFoundException(path)

        for partial_file in partial_files:
            logger.info("target file: %s, start: %d, end: %d",
                        partial_file.path, partial_file.start, partial_file.end)
        logger.info("task size: %d", len(partial_files))

        return TaskSource(options=dict(options.to_map()), files=partial_files)

    def resume(self, task_source: TaskSource, task_count: int, control: Control) -> Dict[str, Any]:
        control(task_source, task_count)
        return {}

    def cleanup(self, task_source: TaskSource, task_count: int,
                success_task_reports: List[Dict[str, Any]]):
        pass

    def open(self, task_source: TaskSource, task_index: int) -> PartialFileInputStream:
        partial_file = task_source.get_file(task_index)
        options = task_source.get_options()
        file_io = self.file_io_factory(partial_file.path, options)

        try:
            original = file_io.new_input_stream(partial_file.path)
        except RemoteIOException as e:
            logger.error(str(e))
            raise
        try:
            return PartialFileInputStream(original, partial_file.start, partial_file.end, partial_file.path)
        except Exception:
            original.close()
            raise
