"""Fixtures and default marks for tests under `tests/functional/`."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner, Result

from clinicflow.entrypoints.cli.main import clinicflow as clinicflow_cli

from tests.helpers.markers import mark_items_under

# pylint: disable=unused-argument, redefined-outer-name

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    mark_items_under(FUNCTIONAL_ROOT, "functional", items)


@pytest.fixture
def cli_env(tmp_path: Path) -> dict[str, str]:
    """Environment isolating the CLI's log file under the test's temp dir."""
    return {"CLINICFLOW_LOG_PATH": str(tmp_path / "logs" / "latest.log")}


@pytest.fixture
def cli(migrated_sqlite_url: str, cli_env: dict[str, str]) -> Callable[..., Result]:
    """Invoke ``clinicflow`` against a migrated SQLite file."""
    runner = CliRunner(env={**cli_env, "CLINICFLOW_DB_URL": migrated_sqlite_url})

    def _invoke(*args: str, **kwargs: Any) -> Result:
        return runner.invoke(clinicflow_cli, list(args), **kwargs)

    return _invoke


@pytest.fixture
def cli_json(cli) -> Callable[..., Any]:
    """Invoke ``clinicflow``, require success and parse stdout as JSON."""

    def _invoke(*args: str) -> Any:
        result = cli(*args)
        assert result.exit_code == 0, result.output
        return json.loads(result.stdout)

    return _invoke
