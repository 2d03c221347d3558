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
"""Develop and production logging presets, filled from thorchain.configure."""

from enum import Enum

from thorchain import configure as conf
from thorchain.utils.loggers.configuration import LogConfiguration


class PresetType(Enum):
    develop = 0
    production = 1


_presets = {preset_type: LogConfiguration() for preset_type in PresetType}
_preset_type = PresetType.production

# LogConfiguration attribute -> configuration name
_FILE_SETTINGS = {
    "log_output_type": "LOG_OUTPUT_TYPE",
    "log_file_location": "LOG_FILE_LOCATION",
    "log_file_prefix": "LOG_FILE_PREFIX",
    "log_file_extension": "LOG_FILE_EXTENSION",
    "log_file_rotate_when": "LOG_FILE_ROTATE_WHEN",
    "log_file_rotate_interval": "LOG_FILE_ROTATE_INTERVAL",
    "log_file_rotate_max_bytes": "LOG_FILE_ROTATE_MAX_BYTES",
    "log_file_rotate_backup_count": "LOG_FILE_ROTATE_BACKUP_COUNT",
    "log_file_rotate_utc": "LOG_FILE_ROTATE_UTC",
}


def get_preset_type() -> PresetType:
    return _preset_type


def set_preset_type(preset_type: PresetType):
    global _preset_type
    _preset_type = preset_type


def get_preset() -> LogConfiguration:
    return _presets[_preset_type]


def update_preset(update_logger=True):
    preset = get_preset()
    develop = _preset_type is PresetType.develop

    preset.log_format = conf.LOG_FORMAT
    preset.log_color = develop
    preset.log_level = conf.THORCHAIN_DEVELOP_LOG_LEVEL if develop else conf.THORCHAIN_LOG_LEVEL
    for attr, name in _FILE_SETTINGS.items():
        setattr(preset, attr, getattr(conf, name))

    if update_logger:
        preset.update_logger()
