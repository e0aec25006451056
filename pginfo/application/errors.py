"""Errors raised by the catalog services themselves.

Driver failures (connection refused, bad SQL, permission denied) are not
wrapped: they reach the caller as the driver raised them.
"""
from __future__ import annotations

from typing import Optional


class PgInfoError(Exception):
  """Base exception for catalog service errors."""


class InvalidArgumentError(PgInfoError, ValueError):
  def __init__(self, message: str, argument: Optional[str] = None):
    super().__init__(message)
    self.argument = argument


class InvalidCatalogError(PgInfoError, ValueError):
  """Raised when type descriptors are requested from an unknown catalog."""

  def __init__(self, catalog_name: str):
    super().__init__(f'Invalid catalog name: {catalog_name!r}')
    self.catalog_name = catalog_name
