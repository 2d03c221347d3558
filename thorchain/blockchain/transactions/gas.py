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
"""Intrinsic gas: the least gas a transaction pays regardless of execution."""

from typing import Iterable, TYPE_CHECKING

from thorchain import configure as conf

if TYPE_CHECKING:
    from thorchain.blockchain.transactions import Clause


def calc_data_gas(data: bytes) -> int:
    zeros = data.count(0)
    return zeros * conf.DATA_GAS_ZERO + (len(data) - zeros) * conf.DATA_GAS_NON_ZERO


def calc_intrinsic_gas(clauses: Iterable['Clause']) -> int:
    clauses = list(clauses)

    # Must pay a static fee even empty!
    if not clauses:
        return conf.TX_GAS + conf.CLAUSE_GAS

    total = conf.TX_GAS
    for clause in clauses:
        if clause.is_contract_creation():
            total += conf.CLAUSE_GAS_CONTRACT_CREATION
        else:
            total += conf.CLAUSE_GAS
        total += calc_data_gas(clause.data)

    return total
