from __future__ import annotations
from typing import Iterable, Optional, Tuple

from core.locator import Locator
from .selectors import DEFAULT_VALIDATION_SELECTORS


class ValidationMessage:
    """
    First element matching any known error-rendering convention.
    Pass ``extra`` to add selectors, or ``selectors`` to replace the defaults.
    """

    def __init__(self, extra: Iterable[str] = (), selectors: Optional[Iterable[str]] = None):
        base = tuple(selectors) if selectors is not None else DEFAULT_VALIDATION_SELECTORS
        merged = list(base)
        for s in extra:
            if s not in merged:
                merged.append(s)
        self.selectors: Tuple[str, ...] = tuple(merged)

    def with_selectors(self, *extra: str) -> "ValidationMessage":
        return ValidationMessage(extra=extra, selectors=self.selectors)

    @property
    def locator(self) -> Locator:
        return Locator.union(*self.selectors).first()
