"""Adapters (infrastructure) for CASEFLOW.

Provide concrete implementations of the ports in `caseflow.interfaces`
(case repositories, unit of work, clocks, ID generators), plus persistence
mapping and related wiring (engines, metadata, migrations).

Dependency rule: may import `caseflow.domain` and `caseflow.interfaces`; the
domain must not import this package.
"""
