"""CASEFLOW test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behaviour every adapter of a port must share (memory and SQLite).
- integration/  : Real interactions with SQLite, Alembic and the bootstrap wiring.
- e2e/          : The CLI (CliRunner) and HTTP API (TestClient) driven from outside.
- fixtures/     : Shared pytest fixtures, loaded via `pytest_plugins`.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Contract tests parametrize implementations to ensure consistent behaviour.
- Property-based tests (hypothesis) live with the layer they exercise.
- Markers: unit, contract, integration, e2e (applied per directory).
"""
