"""
Identifiers — BankCode и AccountNumber

Единственное место, где определены правила формата идентификаторов.
ATM и DebitCard используют эти типы через композицию.

BankCode:
- ровно 3 символа, каждый — ASCII цифра
- первые две цифры в диапазоне 0-9
- третья цифра в диапазоне 1-9 (ограничение именно на последнюю цифру)

AccountNumber:
- ровно 12 символов, каждый — ASCII цифра, без позиционных ограничений
"""

from typing import Annotated, Final

from pydantic import AfterValidator


# =============================================================================
# ФОРМАТ
# =============================================================================

BANK_CODE_LENGTH: Final[int] = 3
ACCOUNT_NUMBER_LENGTH: Final[int] = 12

# Только ASCII: str.isdigit() принимает unicode цифры ("٣", "²")
DIGITS: Final[str] = "0123456789"

# Допустимые значения последней цифры bank code
BANK_CODE_LAST_DIGIT_MIN: Final[int] = 1
BANK_CODE_LAST_DIGIT_MAX: Final[int] = 9

# JSON Schema эквиваленты (contracts/schema)
BANK_CODE_PATTERN: Final[str] = "^[0-9]{2}[1-9]$"
ACCOUNT_NUMBER_PATTERN: Final[str] = "^[0-9]{12}$"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _check_digits(value: str, name: str) -> None:
    for position, ch in enumerate(value):
        if ch not in DIGITS:
            raise ValueError(
                f"{name} must contain only decimal digits, "
                f"got {ch!r} at position {position}"
            )


def validate_bank_code(value: object) -> str:
    """
    Проверка формата bank code.

    Args:
        value: Кандидат (ожидается str)

    Returns:
        value без изменений

    Raises:
        ValueError: Неверный тип, длина != 3, не-цифра или третья цифра 0

    Examples:
        >>> validate_bank_code("812")
        '812'
        >>> validate_bank_code("001")
        '001'
    """
    code = _require_str(value, "bank_id")

    if len(code) != BANK_CODE_LENGTH:
        raise ValueError(
            f"bank_id should be a {BANK_CODE_LENGTH}-digit number, got length {len(code)}"
        )

    _check_digits(code, "bank_id")

    last_digit = int(code[-1])
    if not BANK_CODE_LAST_DIGIT_MIN <= last_digit <= BANK_CODE_LAST_DIGIT_MAX:
        raise ValueError(
            f"bank_id third digit must be in "
            f"[{BANK_CODE_LAST_DIGIT_MIN}, {BANK_CODE_LAST_DIGIT_MAX}], got {last_digit}"
        )

    return code


def validate_account_number(value: object) -> str:
    """
    Проверка формата номера счёта.

    Raises:
        ValueError: Неверный тип, длина != 12 или не-цифра
    """
    account = _require_str(value, "account")

    if len(account) != ACCOUNT_NUMBER_LENGTH:
        raise ValueError(
            f"account should be a {ACCOUNT_NUMBER_LENGTH}-digit number, "
            f"got length {len(account)}"
        )

    _check_digits(account, "account")
    return account


def is_valid_bank_code(value: object) -> bool:
    """Проверка bank code без exception."""
    try:
        validate_bank_code(value)
    except ValueError:
        return False
    return True


def is_valid_account_number(value: object) -> bool:
    """Проверка номера счёта без exception."""
    try:
        validate_account_number(value)
    except ValueError:
        return False
    return True


# =============================================================================
# PYDANTIC ТИПЫ
# =============================================================================

BankCode = Annotated[str, AfterValidator(validate_bank_code)]
AccountNumber = Annotated[str, AfterValidator(validate_account_number)]
