# Copyright 2018 ICON Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
""" A module for configuration"""

import json
import logging
import os
import re
from enum import IntEnum

import thorchain
from thorchain.configure_default import *


class DataType(IntEnum):
    string = 0
    int = 1
    float = 2
    bool = 3
    dict = 4


class ConfigureMetaClass(type):
    """Classes using this metaclass become singletons."""
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(ConfigureMetaClass, cls).__call__(*args, **kwargs)

        return cls._instances[cls]


class Configure(metaclass=ConfigureMetaClass):

    def __init__(self):
        self.__configure_info_list = {}
        self.init_configure()

    def init_configure(self):
        # configure_info_list = {configure_attr: configure_type}
        self.__configure_info_list = {}
        self.__load_configure(thorchain.configure_default, use_env=True)

    @property
    def configure_info_list(self):
        return self.__configure_info_list

    def load_configure_json(self, configure_file_path: str) -> None:
        """method for reading and applying json configuration.

        :param configure_file_path: json configure file path
        :return: None
        """
        logging.debug(f"try load configure from json file ({configure_file_path})")

        with open(configure_file_path) as json_file:
            json_data = json.load(json_file)

        for configure_key, configure_value in json_data.items():
            if configure_key not in self.__configure_info_list:
                logging.debug(f"this is not configure key({configure_key})")
                continue

            configure_type, configure_value = self.__check_value_type(
                type(globals()[configure_key]), configure_value)
            self.__set_configure(configure_key, configure_type, configure_value)

    def __load_configure(self, module, use_env):
        for configure_name in dir(module):
            if not configure_name.isupper():
                continue

            module_value = getattr(module, configure_name)
            if use_env:
                env_value = os.getenv(configure_name, module_value)
                configure_type, configure_value = self.__check_value_type(type(module_value), env_value)
            else:
                configure_type, configure_value = self.__check_value_type(type(module_value), module_value)
            self.__set_configure(configure_name, configure_type, configure_value)

    def __set_configure(self, configure_attr, configure_type, configure_value):
        if configure_attr.find('__') == -1 and configure_type is not None:
            globals()[configure_attr] = configure_value
            self.__configure_info_list[configure_attr] = configure_type

    def __check_value_type(self, target_value_type, value):
        target_value = self.__check_value_condition(target_value_type, value)

        # requirement: bool must be checked earlier than int.
        # If not, all of int and bool will be checked as int.
        if isinstance(target_value, bool):
            configure_type = DataType.bool
        elif isinstance(target_value, float):
            configure_type = DataType.float
        elif isinstance(target_value, str):
            configure_type = DataType.string
        elif isinstance(target_value, int):
            configure_type = DataType.int
        elif isinstance(target_value, dict):
            configure_type = DataType.dict
        else:
            configure_type = None

        return configure_type, target_value

    def __check_value_condition(self, target_value_type, value):
        # cast environment strings back to the type of the default value.
        target_value = value
        if isinstance(value, str) and len(value) > 0 and target_value_type is not str:
            if target_value_type is bool:
                target_value = value.lower() in ("true", "1", "yes")
            elif re.match(r"^\d+?\.\d+?$", value) is not None:
                target_value = float(value)
            elif value.isnumeric():
                target_value = int(value)

        return target_value


def get_configuration(configure_name):
    if configure_name in globals():
        return {
            'name': configure_name,
            'value': str(globals()[configure_name]),
            'type': Configure().configure_info_list[configure_name]
        }
    else:
        return None


def set_configuration(configure_name, configure_value):
    if configure_name in globals():
        globals()[configure_name] = configure_value
        return True
    else:
        return False


Configure()
