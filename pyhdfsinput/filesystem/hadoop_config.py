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
import xml.etree.ElementTree as ElementTree
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


def read_resource(resource: str) -> Dict[str, str]:
    """
    Read the properties of a Hadoop XML resource such as core-site.xml.
    A relative resource missing from the working directory is looked up in
    HADOOP_CONF_DIR.
    """
    resource_path = resource
    conf_dir = os.environ.get('HADOOP_CONF_DIR')
    if not os.path.isabs(resource) and not os.path.exists(resource) and conf_dir:
        resource_path = os.path.join(conf_dir, resource)

    try:
        root = ElementTree.parse(resource_path).getroot()
    except (OSError, ElementTree.ParseError) as e:
        raise ValueError(f"Failed to load Hadoop configuration resource {resource}: {e}") from e

    properties = {}
    for prop in root.iter('property'):
        name = prop.findtext('name')
        if name is None:
            continue
        properties[name.strip()] = (prop.findtext('value') or '').strip()
    return properties


def load_configuration(resources: List[str], overrides: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Merge resources in order, later ones winning, then apply overrides."""
    configuration = {}
    for resource in resources:
        logger.debug("Loading Hadoop configuration resource %s", resource)
        configuration.update(read_resource(resource))
    configuration.update(overrides or {})
    return configuration
