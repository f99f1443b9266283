"""
Amounts — проверка сумм операций

Сумма — знаковое целое (int). Единственное допустимое значение для
deposit/withdraw — строго положительное целое; bool не считается числом.
"""

from .errors import InvalidAmount


def validate_cash_amount(cash: object, operation: str) -> int:
    """
    Проверка суммы операции.

    Args:
        cash: Сумма операции
        operation: Название операции для сообщения ("deposit", "withdraw")

    Returns:
        cash без изменений

    Raises:
        InvalidAmount: Если cash не int или cash <= 0
    """
    if isinstance(cash, bool) or not isinstance(cash, int):
        raise InvalidAmount(
            f"{operation} should be an integer amount, got {type(cash).__name__}"
        )

    if cash <= 0:
        raise InvalidAmount(f"{operation} should be a positive value, got {cash}")

    return cash
