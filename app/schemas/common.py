from typing import Annotated
from pydantic import StringConstraints

# Trimmed, non-empty text
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]

# Trimmed, upper-cased identifier (stock code, plate number)
IdentifierStr = Annotated[
    str, StringConstraints(strip_whitespace=True, to_upper=True, min_length=1, max_length=50)
]


def page_count(total: int, size: int) -> int:
    return (total + size - 1) // size
