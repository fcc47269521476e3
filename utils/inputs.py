import math
from typing import Iterable, List, Union

Number = Union[int, float]


def _to_number(tok: str):
    try:
        return int(tok)
    except ValueError:
        pass
    try:
        return float(tok)
    except ValueError:
        return None


def is_finite(x) -> bool:
    if isinstance(x, bool):
        return False
    if isinstance(x, int):
        return True
    return isinstance(x, float) and math.isfinite(x)


def finite_or(x, fallback: Number = 0) -> Number:
    return x if is_finite(x) else fallback


def finite_values(values: Iterable) -> List[Number]:
    return [v for v in (values or []) if is_finite(v)]


def parse_array(text: str) -> List[Number]:
    """'1, 3, x, 5' -> [1, 3, 5]. Blank and non-finite entries are dropped."""
    if not text:
        return []
    out = []
    for tok in text.split(","):
        tok = tok.strip()
        if not tok:
            continue
        n = _to_number(tok)
        if n is not None and is_finite(n):
            out.append(n)
    return out


def parse_number(text: str, fallback: Number = 0) -> Number:
    n = _to_number((text or "").strip())
    return finite_or(n, fallback)


def clamp_k(k) -> int:
    if not is_finite(k):
        return 0
    return max(0, math.floor(k))


def is_sorted(values) -> bool:
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))


def read_uploaded_text(f) -> str:
    """Decode a Streamlit upload (or any object with .read()) as UTF-8."""
    if f is None:
        return ""
    data = f.read()
    try:
        return data.decode("utf-8", errors="ignore")
    except AttributeError:
        return str(data)
