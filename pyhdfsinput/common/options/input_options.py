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
from typing import List

from pyhdfsinput.common.options.config_option import ConfigOption
from pyhdfsinput.common.options.config_options import ConfigOptions
from pyhdfsinput.common.options.options import Options
from pyhdfsinput.common.options.options_utils import OptionsUtils


class HdfsInputOptions:
    """Options of the HDFS file input."""

    HADOOP_CONFIG_PREFIX: str = "config."

    PATH: ConfigOption[str] = (
        ConfigOptions.key("path")
        .string_type()
        .no_default_value()
        .with_description("Glob root of the files to read. strftime directives are resolved "
                          "against the current time minus 'rewind_seconds'.")
    )

    REWIND_SECONDS: ConfigOption[int] = (
        ConfigOptions.key("rewind_seconds")
        .int_type()
        .default_value(0)
        .with_description("Seconds subtracted from the current time before resolving 'path'.")
    )

    PARTITION: ConfigOption[bool] = (
        ConfigOptions.key("partition")
        .boolean_type()
        .default_value(True)
        .with_description("Whether a file may be split into several byte-range partitions.")
    )

    NUM_PARTITIONS: ConfigOption[int] = (
        ConfigOptions.key("num_partitions")
        .int_type()
        .default_value(-1)
        .with_description("Approximate number of partitions. A value <= 0 means the number "
                          "of available processors.")
    )

    NON_SPLITTABLE_EXTENSIONS: ConfigOption[str] = (
        ConfigOptions.key("non_splittable_extensions")
        .string_type()
        .default_value(".gz,.bz2,.lzo")
        .with_description("Comma-separated file name suffixes that are always read as a single partition.")
    )

    CONFIG_FILES: ConfigOption[str] = (
        ConfigOptions.key("config_files")
        .string_type()
        .default_value("")
        .with_description("Comma-separated Hadoop XML resources, e.g. core-site.xml, loaded in order.")
    )

    @staticmethod
    def config_files(options: Options) -> List[str]:
        return OptionsUtils.convert_to_list(options.get(HdfsInputOptions.CONFIG_FILES))

    @staticmethod
    def non_splittable_extensions(options: Options) -> List[str]:
        return OptionsUtils.convert_to_list(options.get(HdfsInputOptions.NON_SPLITTABLE_EXTENSIONS))


class S3Options:
    S3_ACCESS_KEY_ID = ConfigOptions.key("fs.s3.accessKeyId").string_type().no_default_value().with_description(
        "S3 access key ID")
    S3_ACCESS_KEY_SECRET = ConfigOptions.key("fs.s3.accessKeySecret").string_type().no_default_value().with_description(
        "S3 access key secret")
    S3_SECURITY_TOKEN = ConfigOptions.key("fs.s3.securityToken").string_type().no_default_value().with_description(
        "S3 security token")
    S3_ENDPOINT = ConfigOptions.key("fs.s3.endpoint").string_type().no_default_value().with_description("S3 endpoint")
    S3_REGION = ConfigOptions.key("fs.s3.region").string_type().no_default_value().with_description("S3 region")
