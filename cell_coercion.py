import pandas as pd


def infer_dtype(values):
    """dtype pandas would give the non-missing ``values`` of a column."""
    present = [v for v in values if v is not None and not _is_missing(v)]
    if not present:
        return object
    try:
        return pd.Series(present).infer_objects().dtype
    except (TypeError, ValueError):
        return object


def _is_missing(value) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def coerce_cell_value(values, text):
    """Turn raw input text into the type the column's current values have.

    Raises ValueError when the text cannot be read as that type.
    """
    text = "" if text is None else str(text)
    dtype = infer_dtype(values)

    stripped = text.strip()
    if pd.api.types.is_bool_dtype(dtype):
        if stripped == "":
            return None
        lowered = stripped.lower()
        if lowered in {"1", "true", "t", "yes", "y", "on"}:
            return True
        if lowered in {"0", "false", "f", "no", "n", "off"}:
            return False
        raise ValueError(f"Cannot coerce '{text}' to boolean")

    if pd.api.types.is_integer_dtype(dtype):
        if stripped == "":
            return None
        try:
            return int(stripped)
        except ValueError:
            # whole-number columns still take decimals, e.g. prices
            return float(stripped)

    if pd.api.types.is_float_dtype(dtype):
        if stripped == "":
            return None
        return float(stripped)

    if pd.api.types.is_datetime64_any_dtype(dtype):
        if stripped == "":
            return None
        return pd.to_datetime(stripped, errors="raise")

    return text
