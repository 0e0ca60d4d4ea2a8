from __future__ import annotations

import csv
import io
from typing import Iterable, Mapping, Sequence


def rows_to_csv(fieldnames: Sequence[str], rows: Iterable[Mapping[str, object]]) -> bytes:
    """Serialize report rows with a header row.

    Fields containing a delimiter, quote or newline are quoted and inner
    quotes doubled (csv.QUOTE_MINIMAL).
    """

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(fieldnames), quoting=csv.QUOTE_MINIMAL)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)

    return out.getvalue().encode("utf-8-sig")
