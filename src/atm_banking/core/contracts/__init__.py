"""
Contract Validation Module

Валидация JSON снапшотов сущностей (ATM, DebitCard) против JSON Schema.
"""

from .validators import (
    ATMStateValidator,
    ContractValidator,
    DebitCardStateValidator,
    SchemaLoader,
    validate_atm_state,
    validate_debit_card_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ATMStateValidator",
    "DebitCardStateValidator",
    # Functions
    "validate_atm_state",
    "validate_debit_card_state",
]
