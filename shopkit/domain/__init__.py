from shopkit.domain.stack import EmptyStackError, Stack
from shopkit.domain.values import ValidationError, is_finite_number, is_number

__all__ = [
    "EmptyStackError",
    "Stack",
    "ValidationError",
    "is_finite_number",
    "is_number",
]
