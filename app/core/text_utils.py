from typing import Iterable


def normalize_ingredient_name(name: str) -> str:
    """
    Canonical form of an ingredient name: trimmed and lower-cased
    """
    return name.strip().lower()


def parse_id_list(raw: str | None) -> list[int]:
    """
    Parse a comma-separated id list such as "1,2,3".
    Non-numeric and non-positive entries are dropped silently
    """
    if not raw:
        return []

    ids = []
    for part in raw.split(","):
        part = part.strip()
        try:
            value = int(part)
        except ValueError:
            continue
        if value > 0:
            ids.append(value)
    return ids


def unique_ids(ids: Iterable[int]) -> list[int]:
    """
    Drop duplicates, keeping first-seen order
    """
    return list(dict.fromkeys(ids))
