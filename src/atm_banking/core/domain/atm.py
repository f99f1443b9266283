"""
ATM — Модель банкомата и логика межбанковской комиссии

Pydantic модель: bank code оператора и счётчик наличности (cash_reserves).
ATM оркеструет deposit/withdraw над переданной картой и решает, применять
ли комиссию, по единственному предикату:

    same_bank = (atm.bank_id == card.bank_id)

DEPOSIT:
- same bank:  reserve += cash,        balance += cash
- cross bank: reserve += cash + fee,  balance += cash - fee

WITHDRAWAL:
- same bank:  reserve -= cash,        balance -= cash
- cross bank: reserve -= cash; reserve += fee,  balance -= cash + fee

Комиссия по умолчанию: CROSS_BANK_FEE = 15.

Все предусловия проверяются до мутации: отклонённая операция не меняет
ни ATM, ни карту. Постусловия — assert (только для разработки).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, PrivateAttr, ValidationError

from .amounts import validate_cash_amount
from .debit_card import DebitCard
from .errors import InsufficientReserves, InvalidAmount, InvariantViolation, construction_error
from .identifiers import BankCode, validate_bank_code

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Фиксированная межбанковская комиссия
CROSS_BANK_FEE: Final[int] = 15


@dataclass(frozen=True)
class ATMConfig:
    """Конфигурация ATM."""

    cross_bank_fee: int = CROSS_BANK_FEE

    def __post_init__(self) -> None:
        fee = self.cross_bank_fee
        if isinstance(fee, bool) or not isinstance(fee, int):
            raise ValueError(f"cross_bank_fee must be an integer, got {type(fee).__name__}")
        if fee < 0:
            raise ValueError(f"cross_bank_fee must be non-negative, got {fee}")


# =============================================================================
# РЕЗУЛЬТАТ ОПЕРАЦИИ
# =============================================================================


class TransactionKind(str, Enum):
    """Тип операции ATM"""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class TransactionReceipt:
    """Результат операции ATM."""

    kind: TransactionKind
    cash: int
    same_bank: bool
    fee: int

    # Состояние до/после
    reserve_before: int
    reserve_after: int
    balance_before: int
    balance_after: int

    # Детали
    details: str

    @property
    def reserve_delta(self) -> int:
        return self.reserve_after - self.reserve_before

    @property
    def balance_delta(self) -> int:
        return self.balance_after - self.balance_before


# =============================================================================
# ATM MODEL
# =============================================================================


class ATM(BaseModel):
    """
    Банкомат.

    Создание: ATM.init(bank_id, reserves, config=None) — поднимает
    InvalidConstruction. cash_reserves меняется только через deposit/withdraw.
    Карта передаётся на время операции, ссылка на неё не сохраняется.
    """

    bank_id: BankCode = Field(..., description="Bank code оператора ATM (3 цифры)")
    cash_reserves: int = Field(..., ge=0, strict=True, description="Наличность в ATM")

    model_config = {"extra": "forbid"}

    _config: ATMConfig = PrivateAttr(default_factory=ATMConfig)

    @classmethod
    def init(
        cls,
        bank_id: str,
        reserves: int,
        config: Optional[ATMConfig] = None,
    ) -> "ATM":
        """
        Валидированный конструктор.

        Args:
            bank_id: Bank code оператора
            reserves: Начальная наличность (>= 0)
            config: Конфигурация (default: ATMConfig())

        Raises:
            InvalidConstruction: Если нарушен любой инвариант
        """
        try:
            atm = cls(bank_id=bank_id, cash_reserves=reserves)
        except ValidationError as exc:
            raise construction_error("ATM", exc) from exc

        if config is not None:
            atm._config = config
        return atm

    @property
    def atm_config(self) -> ATMConfig:
        return self._config

    def same_bank(self, card: DebitCard) -> bool:
        """Карта выпущена банком-оператором ATM."""
        return self.bank_id == card.bank_id

    def _fee_for(self, card: DebitCard) -> int:
        return 0 if self.same_bank(card) else self._config.cross_bank_fee

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def deposit(self, card: DebitCard, cash: int) -> TransactionReceipt:
        """
        Внесение наличных на карту через ATM.

        Args:
            card: Карта (мутируется)
            cash: Сумма (> 0)

        Returns:
            TransactionReceipt

        Raises:
            InvalidAmount: Если cash <= 0, либо межбанковское зачисление
                cash - fee не положительно
        """
        validate_cash_amount(cash, "deposit")

        same_bank = self.same_bank(card)
        fee = self._fee_for(card)
        card_credit = cash - fee
        if card_credit <= 0:
            raise InvalidAmount(
                f"cross-bank deposit {cash} does not cover the fee {fee}"
            )

        reserve_before = self.cash_reserves
        balance_before = card.balance

        card.deposit(card_credit)
        self.cash_reserves = reserve_before + cash + fee

        assert self.cash_reserves > reserve_before, (
            "cash reserves should be greater than its previous value after execution"
        )

        if not same_bank:
            logger.info(
                "cross-bank deposit at ATM %s for card bank %s: fee %d",
                self.bank_id, card.bank_id, fee,
            )
        logger.debug(
            "ATM %s deposit %d: reserves %d -> %d",
            self.bank_id, cash, reserve_before, self.cash_reserves,
        )

        return TransactionReceipt(
            kind=TransactionKind.DEPOSIT,
            cash=cash,
            same_bank=same_bank,
            fee=fee,
            reserve_before=reserve_before,
            reserve_after=self.cash_reserves,
            balance_before=balance_before,
            balance_after=card.balance,
            details=self._details("deposit", card, fee),
        )

    def withdraw(self, card: DebitCard, cash: int) -> TransactionReceipt:
        """
        Снятие наличных с карты через ATM.

        Баланс карты не проверяется (см. DebitCard.withdraw).

        Args:
            card: Карта (мутируется)
            cash: Сумма (> 0, <= cash_reserves)

        Returns:
            TransactionReceipt

        Raises:
            InvalidAmount: Если cash <= 0
            InsufficientReserves: Если cash > cash_reserves
        """
        validate_cash_amount(cash, "withdraw")

        if cash > self.cash_reserves:
            logger.warning(
                "ATM %s rejected withdraw %d: reserves %d",
                self.bank_id, cash, self.cash_reserves,
            )
            raise InsufficientReserves(requested=cash, available=self.cash_reserves)

        same_bank = self.same_bank(card)
        fee = self._fee_for(card)

        reserve_before = self.cash_reserves
        balance_before = card.balance

        card.withdraw(cash + fee)
        # Комиссия остаётся в ATM
        self.cash_reserves = reserve_before - cash + fee

        assert self.cash_reserves == reserve_before - cash + fee, (
            "cash reserves should decrease by the dispensed cash net of the fee"
        )
        if same_bank:
            assert self.cash_reserves < reserve_before, (
                "cash reserves should be less than its previous value after execution"
            )

        if not same_bank:
            logger.info(
                "cross-bank withdraw at ATM %s for card bank %s: fee %d",
                self.bank_id, card.bank_id, fee,
            )
        logger.debug(
            "ATM %s withdraw %d: reserves %d -> %d",
            self.bank_id, cash, reserve_before, self.cash_reserves,
        )

        return TransactionReceipt(
            kind=TransactionKind.WITHDRAWAL,
            cash=cash,
            same_bank=same_bank,
            fee=fee,
            reserve_before=reserve_before,
            reserve_after=self.cash_reserves,
            balance_before=balance_before,
            balance_after=card.balance,
            details=self._details("withdraw", card, fee),
        )

    def _details(self, operation: str, card: DebitCard, fee: int) -> str:
        if fee == 0:
            return f"{operation}: ATM {self.bank_id}, card bank {card.bank_id}, no fee"
        return f"{operation}: ATM {self.bank_id}, card bank {card.bank_id}, cross-bank fee={fee}"

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def get_bank_id(self) -> str:
        try:
            return validate_bank_code(self.bank_id)
        except ValueError as exc:
            raise InvariantViolation(str(exc)) from exc

    def get_cash_reserve(self) -> int:
        if self.cash_reserves < 0:
            raise InvariantViolation(
                f"cash_reserves should be a non-negative number, got {self.cash_reserves}"
            )
        return self.cash_reserves
