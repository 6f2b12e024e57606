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

import json
from dataclasses import field, fields, is_dataclass
from typing import Any, Dict, List, Type, TypeVar

T = TypeVar("T")


def json_field(json_name: str, **kwargs):
    """Create a field with custom JSON name"""
    return field(metadata={"json_name": json_name}, **kwargs)


class JSON:

    @staticmethod
    def to_json(obj: Any, **kwargs) -> str:
        return json.dumps(JSON.__to_dict(obj), ensure_ascii=False, **kwargs)

    @staticmethod
    def from_json(json_str: str, target_class: Type[T]) -> T:
        data = json.loads(json_str)
        return JSON.__from_dict(data, target_class)

    @staticmethod
    def __to_dict(obj: Any) -> Dict[str, Any]:
        if hasattr(obj, "to_dict") and callable(getattr(obj, "to_dict")):
            return obj.to_dict()

        result = {}
        for field_info in fields(obj):
            field_value = getattr(obj, field_info.name)
            json_name = field_info.metadata.get("json_name", field_info.name)

            if is_dataclass(field_value):
                result[json_name] = JSON.__to_dict(field_value)
            elif isinstance(field_value, list):
                result[json_name] = [
                    JSON.__to_dict(item) if is_dataclass(item) else item
                    for item in field_value
                ]
            else:
                result[json_name] = field_value

        return result

    @staticmethod
    def __from_dict(data: Dict[str, Any], target_class: Type[T]) -> T:
        if hasattr(target_class, "from_dict") and callable(getattr(target_class, "from_dict")):
            return target_class.from_dict(data)

        # json_name -> field_name, and json_name -> nested dataclass type
        field_mapping = {}
        type_mapping = {}
        for field_info in fields(target_class):
            json_name = field_info.metadata.get("json_name", field_info.name)
            field_mapping[json_name] = field_info.name
            origin_type = getattr(field_info.type, '__origin__', None)
            args = getattr(field_info.type, '__args__', None)
            if is_dataclass(field_info.type):
                type_mapping[json_name] = field_info.type
            elif origin_type in (list, List) and args and is_dataclass(args[0]):
                type_mapping[json_name] = field_info.type

        kwargs = {}
        for json_name, value in data.items():
            if json_name not in field_mapping:
                continue
            field_name = field_mapping[json_name]
            if json_name in type_mapping:
                field_type = type_mapping[json_name]
                if getattr(field_type, '__origin__', None) in (list, List):
                    item_type = field_type.__args__[0]
                    kwargs[field_name] = [JSON.__from_dict(item, item_type) for item in value]
                else:
                    kwargs[field_name] = JSON.__from_dict(value, field_type)
            else:
                kwargs[field_name] = value

        return target_class(**kwargs)
