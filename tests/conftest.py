from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
from unittest.mock import MagicMock

import pytest

# Ensure tests always import the local tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

Response = Union[List[Dict[str, Any]], Exception, Callable[[Mapping[str, Any]], List[Dict[str, Any]]]]


class FakeResult:
  def __init__(self, rows: List[Dict[str, Any]]):
    self._rows = rows

  def mappings(self) -> List[Dict[str, Any]]:
    return [dict(row) for row in self._rows]


class FakeConnection:
  def __init__(self, pool: 'FakePool'):
    self._pool = pool

  async def execute(self, statement, parameters=None) -> FakeResult:
    sql = statement.text
    params = dict(parameters or {})
    self._pool.executed.append((sql, params))
    for fragment, response in self._pool.routes:
      if fragment in sql:
        if isinstance(response, Exception):
          raise response
        if callable(response):
          return FakeResult(response(params))
        return FakeResult(response)
    raise AssertionError(f'unexpected statement: {sql}')

  async def close(self) -> None:
    self._pool.releases += 1


class FakePool:
  """In-memory stand-in for an ``AsyncEngine`` answering statements by text fragment."""

  def __init__(self, routes: Optional[List[Tuple[str, Response]]] = None, connect_error: Optional[Exception] = None):
    self.routes: List[Tuple[str, Response]] = list(routes or [])
    self.connect_error = connect_error
    self.checkouts = 0
    self.releases = 0
    self.disposed = 0
    self.executed: List[Tuple[str, Dict[str, Any]]] = []

  async def connect(self) -> FakeConnection:
    if self.connect_error is not None:
      raise self.connect_error
    self.checkouts += 1
    return FakeConnection(self)

  async def dispose(self) -> None:
    self.disposed += 1

  def statements_matching(self, fragment: str) -> List[Tuple[str, Dict[str, Any]]]:
    return [entry for entry in self.executed if fragment in entry[0]]


@pytest.fixture
def logger() -> MagicMock:
  return MagicMock()


@pytest.fixture
def make_pool() -> Callable[..., FakePool]:
  return FakePool
