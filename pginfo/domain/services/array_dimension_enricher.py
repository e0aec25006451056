"""Domain service joining array probe rows onto column rows."""
from __future__ import annotations

from typing import Dict, Iterable, List, MutableMapping, Optional, Tuple

from pginfo.domain.entities.catalog_rows import ArrayColumnProbe, Column

ColumnKey = Tuple[Optional[str], Optional[str]]


def enrich_array_dimensions(
  columns: List[Column],
  probes: Iterable[ArrayColumnProbe],
) -> None:
  """Set ``array_dimension`` on the column rows matched by the probe rows.

  ``information_schema.columns`` reports every array column as ``ARRAY``
  without its dimensionality, so the value comes from ``pg_attribute``.

  Rows are matched on ``(table_name, column_name)`` and updated in place.
  Probe rows with no matching column are skipped: the probe may cover a wider
  scope than the columns (a whole schema for a single table) or see a catalog
  that changed between the two statements. When the key occurs more than once
  among the columns, only the first occurrence is updated.
  """
  index: Dict[ColumnKey, MutableMapping] = {}
  for column in columns:
    index.setdefault(_column_key(column), column)

  for probe in probes:
    column = index.get(_column_key(probe))
    if column is None:
      continue
    column['array_dimension'] = probe.get('array_dimension')


def _column_key(row) -> ColumnKey:
  return row.get('table_name'), row.get('column_name')
