from typing import Any


def clean_text(value: Any) -> str:
    # Non-string payload values (None, numbers, lists) count as absent
    if not isinstance(value, str):
        return ""
    return value.strip()


def uniq(seq) -> list:
    out = []
    seen = set()
    for x in seq:
        x = clean_text(x)
        if not x or x in seen:
            continue
        seen.add(x)
        out.append(x)
    return out
