"""
Errors — таксономия ошибок банковского домена

Все ошибки — нарушения предусловий, обнаруживаемые синхронно до любой
мутации. Ни одна отклонённая операция не оставляет частичного эффекта.

- InvalidConstruction: невалидный bank code / account / отрицательный баланс
- InvalidAmount: неположительная (или нецелая) сумма операции
- InsufficientReserves: снятие больше наличности в ATM
- InvariantViolation: чтение состояния, нарушающего инвариант класса
"""

from typing import Any


class BankingError(Exception):
    """Базовый класс для всех ошибок домена."""

    pass


class InvalidConstruction(BankingError, ValueError):
    """
    Нарушение инварианта при создании сущности.

    Оборачивает pydantic ValidationError; список ошибок доступен через .errors.
    """

    def __init__(self, entity: str, message: str, errors: list[dict[str, Any]] | None = None):
        self.entity = entity
        self.errors = errors or []
        super().__init__(f"Cannot construct {entity}: {message}")


class InvalidAmount(BankingError, ValueError):
    """Сумма операции должна быть положительным целым числом."""

    pass


class InsufficientReserves(BankingError):
    """
    Запрошенная сумма превышает наличность ATM.

    Attributes:
        requested: запрошенная сумма
        available: cash_reserves на момент запроса
    """

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"withdrawn value {requested} exceeds current cash reserves {available}"
        )


class InvariantViolation(BankingError, RuntimeError):
    """Состояние сущности нарушает её инвариант (обнаружено при чтении)."""

    pass


def construction_error(entity: str, exc: Any) -> InvalidConstruction:
    """
    Конверсия pydantic ValidationError → InvalidConstruction.

    Args:
        entity: Имя сущности ("ATM", "DebitCard")
        exc: pydantic.ValidationError

    Returns:
        InvalidConstruction с перечнем нарушенных инвариантов
    """
    errors = exc.errors(include_url=False)
    summary = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or entity}: {err['msg']}"
        for err in errors
    )
    return InvalidConstruction(entity, summary, errors)
