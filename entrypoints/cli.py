"""CLI entrypoint for pginfo."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pginfo.adapters.input.cli.cli_adapter import CLIAdapter
from pginfo.adapters.presentation.json_presenter import JsonPresenter
from pginfo.adapters.presentation.markdown_presenter import MarkdownPresenter
from pginfo.adapters.presentation.text_presenter import TextPresenter
from pginfo.common.config import get_settings
from pginfo.common.container import create_catalog_query_handler


def main() -> None:
  settings = get_settings()
  logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
  )
  presenters = {
    'text': TextPresenter(),
    'json': JsonPresenter(),
    'markdown': MarkdownPresenter(),
  }
  CLIAdapter(create_catalog_query_handler(settings), presenters).run()


if __name__ == '__main__':
  main()
