import pandas as pd
import numpy as np


def _clean(value):
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def rows_from_frame(df: pd.DataFrame) -> list[dict]:
    """DataFrame records as plain row dicts, missing values as None."""
    return [
        {col: _clean(value) for col, value in record.items()}
        for record in df.to_dict("records")
    ]


def frame_from_rows(rows, columns=None) -> pd.DataFrame:
    rows = [dict(row) for row in rows]
    if columns is None:
        columns = []
        for row in rows:
            for col in row:
                if col not in columns:
                    columns.append(col)
    return pd.DataFrame(rows, columns=list(columns))


def build_default_row(df: pd.DataFrame) -> dict:
    row = {}
    for col, dtype in df.dtypes.items():
        if pd.api.types.is_datetime64_any_dtype(dtype):
            row[col] = pd.NaT
        elif pd.api.types.is_bool_dtype(dtype):
            row[col] = None
        elif pd.api.types.is_numeric_dtype(dtype):
            row[col] = np.nan
        else:
            row[col] = None
    return row


def default_row_factory(df: pd.DataFrame):
    """Row factory producing blank rows typed after ``df``'s columns."""
    def create():
        return build_default_row(df)

    return create
