"""Entry points for CASEFLOW.

Outer adapters that drive the application: the ``caseflow`` command line
(`caseflow.entrypoints.cli`) and the HTTP API (`caseflow.entrypoints.http`).

Import rules:
- Entry points obtain a message bus from `caseflow.bootstrap` and talk to the
  core only through commands, queries and the views they return.
- Domain errors are translated into exit codes / HTTP problems here and
  nowhere else.
"""
