"""
Domain models and value objects.

Contains the banking entities (ATM, DebitCard), identifier value types,
and the error taxonomy.
"""

from atm_banking.core.domain.amounts import validate_cash_amount
from atm_banking.core.domain.atm import (
    ATM,
    CROSS_BANK_FEE,
    ATMConfig,
    TransactionKind,
    TransactionReceipt,
)
from atm_banking.core.domain.debit_card import DebitCard
from atm_banking.core.domain.errors import (
    BankingError,
    InsufficientReserves,
    InvalidAmount,
    InvalidConstruction,
    InvariantViolation,
)
from atm_banking.core.domain.identifiers import (
    ACCOUNT_NUMBER_LENGTH,
    ACCOUNT_NUMBER_PATTERN,
    BANK_CODE_LENGTH,
    BANK_CODE_PATTERN,
    AccountNumber,
    BankCode,
    is_valid_account_number,
    is_valid_bank_code,
    validate_account_number,
    validate_bank_code,
)

__all__ = [
    # Identifiers
    "BankCode",
    "AccountNumber",
    "BANK_CODE_LENGTH",
    "BANK_CODE_PATTERN",
    "ACCOUNT_NUMBER_LENGTH",
    "ACCOUNT_NUMBER_PATTERN",
    "validate_bank_code",
    "validate_account_number",
    "is_valid_bank_code",
    "is_valid_account_number",
    "validate_cash_amount",
    # Errors
    "BankingError",
    "InvalidConstruction",
    "InvalidAmount",
    "InsufficientReserves",
    "InvariantViolation",
    # DebitCard model
    "DebitCard",
    # ATM model
    "ATM",
    "ATMConfig",
    "CROSS_BANK_FEE",
    "TransactionKind",
    "TransactionReceipt",
]
