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

from pyhdfsinput.common.exceptions import (FileInputException,
                                           PathNotFoundException,
                                           RemoteIOException)
from pyhdfsinput.common.file_io import FileIO, FileStatus
from pyhdfsinput.common.options import Options
from pyhdfsinput.common.options.input_options import HdfsInputOptions
from pyhdfsinput.plugin.hdfs_file_input_plugin import HdfsFileInputPlugin
from pyhdfsinput.read.file_lister import FileLister
from pyhdfsinput.read.partial_file import FileEntry, PartialFile
from pyhdfsinput.read.partial_file_input_stream import PartialFileInputStream
from pyhdfsinput.read.partition_planner import FilePartitioner, PartitionPlanner
from pyhdfsinput.read.task_source import TaskSource

__all__ = [
    'FileEntry',
    'FileIO',
    'FileInputException',
    'FileLister',
    'FilePartitioner',
    'FileStatus',
    'HdfsFileInputPlugin',
    'HdfsInputOptions',
    'Options',
    'PartialFile',
    'PartialFileInputStream',
    'PartitionPlanner',
    'PathNotFoundException',
    'RemoteIOException',
    'TaskSource',
]
