"""Interfaces (application boundary) for ARGUS UTILS.

Defines framework-free contracts shared by the helpers and adapters: the
credentials capability consumed by SMB credential injection and the redactor
used to keep secrets out of logs.

Dependency rule: this package is independent; do not import from any other
`argus_utils.*` modules.
"""
