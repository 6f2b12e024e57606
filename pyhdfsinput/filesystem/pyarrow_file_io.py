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
import re
import subprocess
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import pyarrow
from fsspec.implementations.arrow import ArrowFSWrapper
from packaging.version import parse
from pyarrow.fs import FileSystem

from pyhdfsinput.common.options import Options
from pyhdfsinput.common.options.input_options import HdfsInputOptions, S3Options
from pyhdfsinput.filesystem import hadoop_config
from pyhdfsinput.filesystem.fsspec_file_io import FsspecFileIO

S3_SCHEMES = {"s3", "s3a", "s3n"}
HDFS_SCHEMES = {"hdfs", "viewfs"}


class PyArrowFileIO(FsspecFileIO):
    """
    FileIO backed by a pyarrow filesystem chosen from the URI scheme of path.
    """

    def __init__(self, path: str, options: Optional[Options] = None):
        self.logger = logging.getLogger(__name__)
        self.properties = options or Options.from_none()
        scheme, netloc, _ = self.parse_location(path)
        self.scheme = scheme
        self.netloc = netloc
        # paths are handed back in the form they were given
        self.qualified = bool(urlparse(path).scheme)
        if scheme in S3_SCHEMES:
            self.arrow_filesystem = self._initialize_s3_fs()
        elif scheme in HDFS_SCHEMES:
            self.arrow_filesystem = self._initialize_hdfs_fs(netloc)
        elif scheme in {"file"}:
            self.arrow_filesystem = self._initialize_local_fs()
        else:
            raise ValueError(f"Unrecognized filesystem type in URI: {scheme}")
        super().__init__(ArrowFSWrapper(self.arrow_filesystem))

    @staticmethod
    def parse_location(location: str):
        uri = urlparse(location)
        if not uri.scheme:
            return "file", uri.netloc, os.path.abspath(location)
        elif uri.scheme in HDFS_SCHEMES:
            return uri.scheme, uri.netloc, uri.path
        else:
            return uri.scheme, uri.netloc, f"{uri.netloc}{uri.path}"

    @staticmethod
    def _create_s3_retry_config(
            max_attempts: int = 10,
            request_timeout: int = 60,
            connect_timeout: int = 60
    ) -> Dict[str, Any]:
        """
        AwsStandardS3RetryStrategy and timeout parameters are only available
        in PyArrow >= 8.0.0.
        """
        if parse(pyarrow.__version__) < parse("8.0.0"):
            return {}

        from pyarrow.fs import AwsStandardS3RetryStrategy
        return {
            'request_timeout': request_timeout,
            'connect_timeout': connect_timeout,
            'retry_strategy': AwsStandardS3RetryStrategy(max_attempts=max_attempts),
        }

    def _initialize_s3_fs(self) -> FileSystem:
        from pyarrow.fs import S3FileSystem

        client_kwargs = {
            "endpoint_override": self.properties.get(S3Options.S3_ENDPOINT),
            "access_key": self.properties.get(S3Options.S3_ACCESS_KEY_ID),
            "secret_key": self.properties.get(S3Options.S3_ACCESS_KEY_SECRET),
            "session_token": self.properties.get(S3Options.S3_SECURITY_TOKEN),
            "region": self.properties.get(S3Options.S3_REGION),
        }
        client_kwargs.update(self._create_s3_retry_config())

        return S3FileSystem(**client_kwargs)

    def _initialize_hdfs_fs(self, netloc: Optional[str]) -> FileSystem:
        from pyarrow.fs import HadoopFileSystem

        if 'HADOOP_HOME' not in os.environ:
            raise RuntimeError("HADOOP_HOME environment variable is not set.")

        hadoop_home = os.environ.get("HADOOP_HOME")
        native_lib_path = f"{hadoop_home}/lib/native"
        os.environ['LD_LIBRARY_PATH'] = f"{native_lib_path}:{os.environ.get('LD_LIBRARY_PATH', '')}"

        if 'CLASSPATH' not in os.environ:
            class_paths = subprocess.run(
                [f'{hadoop_home}/bin/hadoop', 'classpath', '--glob'],
                capture_output=True,
                text=True,
                check=True
            )
            os.environ['CLASSPATH'] = class_paths.stdout.strip()

        extra_conf = hadoop_config.load_configuration(
            HdfsInputOptions.config_files(self.properties),
            self.properties.with_prefix(HdfsInputOptions.HADOOP_CONFIG_PREFIX))

        # "default" makes libhdfs use fs.defaultFS
        uri = urlparse(f"hdfs://{netloc}") if netloc else None
        host = uri.hostname if uri is not None and uri.hostname else "default"
        port = uri.port if uri is not None and uri.port else 0
        self.logger.info("Connecting to HDFS %s:%s", host, port)
        return HadoopFileSystem(
            host=host,
            port=port,
            user=os.environ.get('HADOOP_USER_NAME', 'hadoop'),
            extra_conf=extra_conf or None,
        )

    def _initialize_local_fs(self) -> FileSystem:
        from pyarrow.fs import LocalFileSystem

        return LocalFileSystem()

    def to_filesystem_path(self, path: str) -> str:
        """
        Strip scheme and authority from a URI. Everything after them is kept
        verbatim so that '?' in a glob pattern is not taken for a query.
        """
        if "://" not in path:
            return path

        scheme, rest = path.split("://", 1)
        if scheme in S3_SCHEMES:
            # For S3, return "bucket/path" format
            result = re.sub(r'/+', '/', rest).lstrip('/')
            return result if result else '.'

        slash = rest.find('/')
        result = re.sub(r'/+', '/', rest[slash:]) if slash >= 0 else ''
        return result if result else '/'

    def to_qualified_path(self, name: str) -> str:
        if not self.qualified:
            return name
        if self.scheme in S3_SCHEMES:
            return f"{self.scheme}://{name.lstrip('/')}"
        if self.scheme in HDFS_SCHEMES:
            return f"{self.scheme}://{self.netloc}/{name.lstrip('/')}"
        return f"{self.scheme}://{name}"
