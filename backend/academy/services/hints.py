from numbers import Real

HINTS = {
    (1, 0): "Think about what makes people act without thinking carefully...",
    (1, 1): "Consider which role gives you the most legitimate reason to enter...",
    (1, 2): "What makes you trust an email more - generic or personal details?",
    (2, 0): "What do most users choose for passwords?",
    (2, 1): "Look for patterns in character substitutions...",
    (2, 2): "Think efficiency - start with the easiest targets first...",
}
FALLBACK_HINT = "Think like a hacker - what's the easiest path to success?"


def _as_key_part(value):
    """Integral numbers and digit strings map to an int key; anything else to None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        return int(value) if value.lstrip('-').isdigit() else None
    if isinstance(value, Real) and float(value).is_integer():
        return int(value)
    return None


def lookup_hint(level, question, hints=None) -> str:
    """Hint text for a level/question pair; numeric strings are accepted."""
    table = HINTS if hints is None else hints
    key = (_as_key_part(level), _as_key_part(question))
    return table.get(key, FALLBACK_HINT)
