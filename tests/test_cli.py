"""Tests for the command line entry point."""

from unittest.mock import patch

import pytest

from gridsnake import cli
from gridsnake.constants import CELL_SIZE


def test_defaults():
    args = cli.build_parser().parse_args([])
    assert args.seed is None
    assert args.mute is False
    assert args.debug is False
    assert args.cell_size == CELL_SIZE


def test_main_passes_options_to_run():
    with patch.object(cli, "run") as mock_run:
        cli.main(["--seed", "42", "--mute", "--cell-size", "16"])
    mock_run.assert_called_once_with(seed=42, sound=False, debug=False, cell_size=16)


def test_rejects_tiny_cells():
    with patch.object(cli, "run") as mock_run, pytest.raises(SystemExit):
        cli.main(["--cell-size", "2"])
    mock_run.assert_not_called()
