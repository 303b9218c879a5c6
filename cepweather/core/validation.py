"""Shape checks for inbound postal codes."""
from __future__ import annotations

import re

CEP_LENGTH = 8
_CEP_PATTERN = re.compile(r"[0-9]{8}")


def is_cep_valid(cep: str) -> bool:
    """Return ``True`` when ``cep`` is exactly eight ASCII digits."""
    if not cep:
        return False
    if len(cep) != CEP_LENGTH:
        return False
    return _CEP_PATTERN.fullmatch(cep) is not None


__all__ = ["CEP_LENGTH", "is_cep_valid"]
