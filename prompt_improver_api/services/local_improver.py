from typing import Callable, List, Tuple

# (marker, rewrite, case_insensitive)
_Rule = Tuple[str, Callable[[str], str], bool]

_RULES: List[_Rule] = [
    ("detailed", lambda text: "Create a detailed " + text, False),
    ("high quality", lambda text: text + ", ensuring high quality output", True),
    ("style", lambda text: text + ", maintaining a professional and engaging style", False),
    ("format", lambda text: text + ". Present the information in a clear, well-structured format", False),
    ("example", lambda text: text + ", including relevant examples where appropriate", False),
]


def improve_local(text: str) -> str:
    improved = text.strip()
    for marker, rewrite, case_insensitive in _RULES:
        haystack = improved.lower() if case_insensitive else improved
        if marker not in haystack:
            improved = rewrite(improved)
    return improved
