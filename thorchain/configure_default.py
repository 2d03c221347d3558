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
"""All thorchain configure values can be set by system environment.
Before that, thorchain uses the default values below.
"""

import os

from enum import IntFlag, auto


THORCHAIN_ROOT_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


#############
# LOGGING ###
#############
class LogOutputType(IntFlag):
    console = auto()
    file = auto()


THORCHAIN_LOG_LEVEL = os.getenv('THORCHAIN_LOG_LEVEL', 'DEBUG')
THORCHAIN_DEVELOP_LOG_LEVEL = "SPAM"
LOG_FORMAT = "%(asctime)s,%(msecs)03d %(process)d %(thread)d {CHAIN_TAG}" \
             "%(levelname)s %(filename)s(%(lineno)d) %(message)s"

LOG_OUTPUT_TYPE = LogOutputType.console

LOG_FILE_LOCATION = os.path.join(THORCHAIN_ROOT_PATH, 'log')
LOG_FILE_PREFIX = "thorchain"
LOG_FILE_EXTENSION = "log"

LOG_FILE_ROTATE_WHEN = ''  # Default '', Do no rotate log files by time
LOG_FILE_ROTATE_INTERVAL = 1

LOG_FILE_ROTATE_MAX_BYTES = 0  # Default 0, Do not rotate log files by max bytes

LOG_FILE_ROTATE_BACKUP_COUNT = 10
LOG_FILE_ROTATE_UTC = False


####################
# INTRINSIC GAS ###
####################
TX_GAS = 5000
CLAUSE_GAS = 16000
CLAUSE_GAS_CONTRACT_CREATION = 48000
DATA_GAS_ZERO = 4
DATA_GAS_NON_ZERO = 68
