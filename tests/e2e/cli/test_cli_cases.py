"""End-to-end tests for ``caseflow cases``.

Each test drives the CLI against a freshly migrated SQLite file, so the whole
path from argument parsing to the database and back is exercised.
"""

from click.testing import CliRunner

from caseflow.adapters.id_generators import SequentialIdGenerator
from caseflow.bootstrap import AppContainer, build_message_bus
from caseflow.entrypoints.cli.main import caseflow
from caseflow.service_layer import commands
from tests.helpers.cli import json_out
from tests.unit.service_layer.fakes import FakeUoW, FixedClock

# pylint: disable=magic-value-comparison


def test_create_prints_the_new_case(cli):
    """`create` prints the stored case as JSON with camelCase keys."""
    doc = json_out(
        cli("cases", "create", "  Printer on fire ", "-p", "critical", "-d", "Room 4")
    )

    assert doc["title"] == "Printer on fire"
    assert doc["description"] == "Room 4"
    assert doc["status"] == "OPEN"
    assert doc["priority"] == "CRITICAL"
    assert doc["assigneeId"] is None
    assert doc["createdAt"] == doc["updatedAt"]
    assert doc["version"] == 1
    assert len(doc["id"]) == 36  # uuid4 by default


def test_lifecycle_through_the_cli(cli):
    """Create, move forward twice, then read it back."""
    case_id = json_out(cli("cases", "create", "Bug", "--priority", "HIGH"))["id"]

    assert json_out(cli("cases", "set-status", case_id, "in_progress"))["status"] == (
        "IN_PROGRESS"
    )
    done = json_out(cli("cases", "set-status", case_id, "DONE"))
    assert done["version"] == 3

    assert json_out(cli("cases", "get", case_id)) == done


def test_list_filters_and_orders(cli):
    """`list` returns newest first and honours both filters."""
    first = json_out(cli("cases", "create", "first", "-p", "LOW"))["id"]
    second = json_out(cli("cases", "create", "second", "-p", "HIGH"))["id"]
    json_out(cli("cases", "set-status", second, "IN_PROGRESS"))

    assert [c["id"] for c in json_out(cli("cases", "list"))] == [second, first]
    assert [c["id"] for c in json_out(cli("cases", "list", "-s", "OPEN"))] == [first]
    assert json_out(cli("cases", "list", "-s", "OPEN", "-p", "HIGH")) == []
    assert json_out(cli("cases", "list", "--status", "whatever")) == []


def test_blank_title_exits_2(cli):
    """Invalid input exits with status 2 and a message on stderr."""
    result = cli("cases", "create", "   ", "-p", "LOW")
    assert result.exit_code == 2
    assert "title: must not be blank" in result.stderr
    assert result.stdout == ""


def test_unknown_priority_exits_2(cli):
    """Priorities outside the enumeration are invalid input."""
    result = cli("cases", "create", "Bug", "-p", "urgent")
    assert result.exit_code == 2
    assert "priority" in result.stderr


def test_unknown_status_exits_2(cli):
    """A status that names no lifecycle member exits with status 2."""
    case_id = json_out(cli("cases", "create", "Bug", "-p", "LOW"))["id"]
    result = cli("cases", "set-status", case_id, "REOPENED")
    assert result.exit_code == 2
    assert "Invalid case status: REOPENED" in result.stderr


def test_missing_case_exits_3(cli):
    """Unknown ids exit with status 3 for both get and set-status."""
    for args in (["get", "nope"], ["set-status", "nope", "DONE"]):
        result = cli("cases", *args)
        assert result.exit_code == 3, result.output
        assert "Case not found: nope" in result.stderr


def test_rejected_transition_exits_4(cli):
    """Skipping a lifecycle step exits with status 4 and leaves the case alone."""
    case_id = json_out(cli("cases", "create", "Bug", "-p", "LOW"))["id"]

    result = cli("cases", "set-status", case_id, "CLOSED")
    assert result.exit_code == 4
    assert "OPEN -> CLOSED" in result.stderr
    assert json_out(cli("cases", "get", case_id))["status"] == "OPEN"


def test_missing_db_url(runner):
    """Without CASEFLOW_DB_URL the command explains how to set it."""
    result = runner.invoke(
        caseflow,
        ["--no-flight-recorder", "cases", "list"],
        env={"CASEFLOW_DB_URL": ""},
    )
    assert result.exit_code == 1
    assert "CASEFLOW_DB_URL is not set" in result.stderr


def test_unexpected_errors_are_not_leaked():
    """Anything unexpected exits with status 1 and a generic message.

    `-qq` keeps the logged traceback off the console.
    """

    def explode(cmd, uow):
        raise RuntimeError("secret internals")

    bus = build_message_bus(
        FakeUoW(),
        {commands.CreateCase: explode},
        id_generator=SequentialIdGenerator(),
        clock=FixedClock(),
    )
    result = CliRunner().invoke(
        caseflow,
        ["-qq", "--no-flight-recorder", "cases", "create", "Bug", "-p", "LOW"],
        obj=AppContainer(message_bus=bus),
    )

    assert result.exit_code == 1
    assert "Error: Unexpected error" in result.stderr
    assert "secret internals" not in result.output
