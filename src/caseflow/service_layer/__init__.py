"""Service layer for CASEFLOW.

Implements application use-cases: command/query handlers, orchestration, and
transaction boundaries. Calls domain objects and the ports defined in
`caseflow.interfaces`.

Dependency rule: may import `caseflow.domain` and `caseflow.interfaces`, but not
`caseflow.adapters` or `caseflow.entrypoints`.
"""
