"""Stateless text, binary and path helpers.

This package holds the pure transforms used when building requests for the
recording service and when turning the file paths it returns into paths the
local media player can open.

Scope:
- Small, stateless helpers (formatting, splitting, base64, path rewriting,
  trivial string predicates) organized by single-purpose module.
- ``files`` is the only module that touches the filesystem; keep it shallow.
- No network I/O and no knowledge of the addon's settings object; credential
  injection depends only on :class:`argus_utils.interfaces.credentials.Credentials`.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
