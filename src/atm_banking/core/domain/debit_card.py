"""
DebitCard — Модель дебетовой карты

Pydantic модель: номер счёта (12 цифр), баланс и bank code эмитента.
Карта ничего не знает об ATM: только примитивы deposit/withdraw.

Инварианты (проверяются при создании):
- balance >= 0
- bank_id — валидный BankCode
- account — валидный AccountNumber

withdraw НЕ проверяет достаточность баланса: баланс может стать
отрицательным. Инвариант balance >= 0 гарантируется только при создании,
а get_balance() на таком состоянии поднимает InvariantViolation.
"""

import logging

from pydantic import BaseModel, Field, ValidationError

from .amounts import validate_cash_amount
from .errors import InvariantViolation, construction_error
from .identifiers import AccountNumber, BankCode, validate_account_number, validate_bank_code

logger = logging.getLogger(__name__)


class DebitCard(BaseModel):
    """
    Дебетовая карта.

    Создание: DebitCard.init(account, balance, bank_id) — поднимает
    InvalidConstruction; прямой вызов DebitCard(...) поднимает ValidationError.
    Мутации только через deposit/withdraw.
    """

    account: AccountNumber = Field(..., description="Номер счёта (12 цифр)")
    balance: int = Field(..., ge=0, strict=True, description="Баланс карты")
    bank_id: BankCode = Field(..., description="Bank code эмитента (3 цифры)")

    model_config = {"extra": "forbid"}

    @classmethod
    def init(cls, account: str, balance: int, bank_id: str) -> "DebitCard":
        """
        Валидированный конструктор.

        Raises:
            InvalidConstruction: Если нарушен любой инвариант
        """
        try:
            return cls(account=account, balance=balance, bank_id=bank_id)
        except ValidationError as exc:
            raise construction_error("DebitCard", exc) from exc

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def deposit(self, cash: int) -> None:
        """
        Зачисление на карту: balance += cash.

        Raises:
            InvalidAmount: Если cash <= 0
        """
        validate_cash_amount(cash, "deposit")

        balance_before = self.balance
        self.balance = balance_before + cash

        assert self.balance == balance_before + cash, (
            "deposit result equals cash plus previous balance"
        )
        logger.debug(
            "card %s deposit %d: balance %d -> %d",
            self.account, cash, balance_before, self.balance,
        )

    def withdraw(self, cash: int) -> None:
        """
        Списание с карты: balance -= cash.

        Достаточность баланса не проверяется.

        Raises:
            InvalidAmount: Если cash <= 0
        """
        validate_cash_amount(cash, "withdraw")

        balance_before = self.balance
        self.balance = balance_before - cash

        assert self.balance == balance_before - cash, (
            "withdraw result equals previous balance minus cash"
        )
        logger.debug(
            "card %s withdraw %d: balance %d -> %d",
            self.account, cash, balance_before, self.balance,
        )
        if self.balance < 0:
            logger.warning(
                "card %s balance went negative: %d", self.account, self.balance
            )

    def is_overdrawn(self) -> bool:
        """Баланс ниже нуля (после неограниченного withdraw)."""
        return self.balance < 0

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def get_bank_id(self) -> str:
        try:
            return validate_bank_code(self.bank_id)
        except ValueError as exc:
            raise InvariantViolation(str(exc)) from exc

    def get_account(self) -> str:
        try:
            return validate_account_number(self.account)
        except ValueError as exc:
            raise InvariantViolation(str(exc)) from exc

    def get_balance(self) -> int:
        """
        Текущий баланс.

        Raises:
            InvariantViolation: Если баланс отрицательный
        """
        if self.balance < 0:
            raise InvariantViolation(
                f"balance should be a non-negative number, got {self.balance}"
            )
        return self.balance
