from dataclasses import replace
from typing import Dict, Optional

from .models import MethodRecord

ASSERT_PREFIX = "assert"
NEGATION = "Not"


def positive_name(name: str) -> Optional[str]:
    """Name of the assertion ``name`` negates, or None if it is not a negative assertion."""
    if name.startswith(ASSERT_PREFIX) and NEGATION in name[len(ASSERT_PREFIX):]:
        return name.replace(NEGATION, "", 1)
    return None


def merge_negatives(methods: Dict[str, MethodRecord]) -> Dict[str, MethodRecord]:
    merged = dict(sorted(methods.items()))
    for name in list(merged):
        if name not in merged:
            continue
        positive = positive_name(name)
        if positive is None or positive not in merged:
            continue
        merged[positive] = replace(merged[positive], inverse=merged.pop(name))
    return merged
