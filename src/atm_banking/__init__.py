"""
ATM / Debit Card banking model.

Две сущности (ATM и DebitCard) с проверкой инвариантов при создании,
пред-/постусловиями операций и расчётом межбанковской комиссии.
"""

__version__ = "0.1.0"
