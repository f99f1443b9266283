"""
Тесты для идентификаторов: BankCode, AccountNumber

Проверяет:
1. Допустимые bank codes (третья цифра 1-9, первые две 0-9)
2. Отклонение неверной длины, не-цифр, третьей цифры 0
3. Номера счетов (12 ASCII цифр)
4. Pydantic типы BankCode / AccountNumber
5. Согласованность с JSON Schema паттернами
"""

import re

import pytest
from pydantic import TypeAdapter, ValidationError

from atm_banking.core.domain import (
    ACCOUNT_NUMBER_PATTERN,
    BANK_CODE_PATTERN,
    AccountNumber,
    BankCode,
    is_valid_account_number,
    is_valid_bank_code,
    validate_account_number,
    validate_bank_code,
)


VALID_BANK_CODES = ["001", "006", "812", "999", "109", "091"]

INVALID_BANK_CODES = [
    "000",  # третья цифра 0
    "810",  # третья цифра 0
    "12",  # слишком короткий
    "1234",  # слишком длинный
    "",
    "a12",  # не-цифра в первой позиции
    "1b2",
    "12c",
    " 12",
    "1٣2",  # unicode цифра
    "-12",
]

VALID_ACCOUNTS = ["123456789012", "000000000000", "123456783946", "999999999999"]

INVALID_ACCOUNTS = [
    "k23456789012",
    "12345678901",  # 11 цифр
    "1234567890123",  # 13 цифр
    "",
    "12345678901 ",
    "1234-5678-90",
    "12345678901²",  # unicode superscript
]


# =============================================================================
# BANK CODE
# =============================================================================


class TestBankCode:
    """Тесты для BankCode"""

    @pytest.mark.parametrize("code", VALID_BANK_CODES)
    def test_valid_bank_code(self, code: str) -> None:
        """Валидный bank code возвращается без изменений"""
        assert validate_bank_code(code) == code
        assert is_valid_bank_code(code)

    @pytest.mark.parametrize("code", INVALID_BANK_CODES)
    def test_invalid_bank_code(self, code: str) -> None:
        """Невалидный bank code отклоняется"""
        with pytest.raises(ValueError):
            validate_bank_code(code)
        assert not is_valid_bank_code(code)

    def test_third_digit_zero_message(self) -> None:
        """Сообщение называет нарушенное правило"""
        with pytest.raises(ValueError) as exc_info:
            validate_bank_code("000")
        assert "third digit" in str(exc_info.value)

    def test_first_digits_may_be_zero(self) -> None:
        """Ограничение 1-9 только на последнюю цифру"""
        assert validate_bank_code("001") == "001"

    def test_length_message(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            validate_bank_code("8120")
        assert "3-digit" in str(exc_info.value)

    @pytest.mark.parametrize("value", [812, None, 8.12, b"812"])
    def test_non_string_rejected(self, value: object) -> None:
        """Не-строки отклоняются"""
        with pytest.raises(ValueError) as exc_info:
            validate_bank_code(value)
        assert "string" in str(exc_info.value)

    def test_pydantic_type(self) -> None:
        """BankCode как pydantic тип"""
        adapter = TypeAdapter(BankCode)
        assert adapter.validate_python("812") == "812"
        with pytest.raises(ValidationError):
            adapter.validate_python("000")
        with pytest.raises(ValidationError):
            adapter.validate_python(812)


# =============================================================================
# ACCOUNT NUMBER
# =============================================================================


class TestAccountNumber:
    """Тесты для AccountNumber"""

    @pytest.mark.parametrize("account", VALID_ACCOUNTS)
    def test_valid_account(self, account: str) -> None:
        assert validate_account_number(account) == account
        assert is_valid_account_number(account)

    @pytest.mark.parametrize("account", INVALID_ACCOUNTS)
    def test_invalid_account(self, account: str) -> None:
        with pytest.raises(ValueError):
            validate_account_number(account)
        assert not is_valid_account_number(account)

    def test_non_digit_position_in_message(self) -> None:
        """Сообщение указывает позицию не-цифры"""
        with pytest.raises(ValueError) as exc_info:
            validate_account_number("k23456789012")
        assert "position 0" in str(exc_info.value)

    def test_pydantic_type(self) -> None:
        adapter = TypeAdapter(AccountNumber)
        assert adapter.validate_python("123456789012") == "123456789012"
        with pytest.raises(ValidationError):
            adapter.validate_python("k23456789012")


# =============================================================================
# SCHEMA PATTERN CONSISTENCY
# =============================================================================


class TestPatternConsistency:
    """Python валидаторы и JSON Schema паттерны принимают одно и то же"""

    @pytest.mark.parametrize("code", VALID_BANK_CODES + INVALID_BANK_CODES)
    def test_bank_code_pattern(self, code: str) -> None:
        matches = re.fullmatch(BANK_CODE_PATTERN.strip("^$"), code, flags=re.ASCII) is not None
        assert matches == is_valid_bank_code(code)

    @pytest.mark.parametrize("account", VALID_ACCOUNTS + INVALID_ACCOUNTS)
    def test_account_pattern(self, account: str) -> None:
        matches = (
            re.fullmatch(ACCOUNT_NUMBER_PATTERN.strip("^$"), account, flags=re.ASCII)
            is not None
        )
        assert matches == is_valid_account_number(account)
