from typing import Mapping, Optional


def _find_value(tags: Mapping[str, str], key: str) -> Optional[str]:
    key = key.lower()
    for k, v in tags.items():
        if k.lower() == key:
            return v
    return None


def matches_tag_filter(tags: Optional[Mapping[str, str]], tag_filter: str) -> bool:
    """
    Confere as tags de um recurso contra um filtro, sem diferenciar maiúsculas:

    - "env=prod"   -> tag env com valor exatamente "prod"
    - "team~data"  -> tag team cujo valor contém "data"
    - "owner"      -> tag owner existe (qualquer valor)
    - ""           -> o recurso tem pelo menos uma tag

    Tags None nunca casam.
    """
    if tags is None:
        return False

    if not tag_filter:
        return len(tags) > 0

    # '~' é checado antes de '=': "k~a=b" é parcial com valor "a=b"
    if "~" in tag_filter:
        key, partial = tag_filter.split("~", 1)
        value = _find_value(tags, key)
        return value is not None and partial.lower() in value.lower()

    if "=" in tag_filter:
        key, expected = tag_filter.split("=", 1)
        value = _find_value(tags, key)
        return value is not None and value.lower() == expected.lower()

    return _find_value(tags, tag_filter) is not None
