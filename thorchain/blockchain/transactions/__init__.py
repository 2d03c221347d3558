from .clause import Clause
from .reserved import Reserved
from .gas import calc_data_gas, calc_intrinsic_gas
from .transaction import Transaction
from .transaction_builder import TransactionBuilder
from .transaction_serializer import TransactionSerializer
from .transaction_verifier import TransactionVerifier
