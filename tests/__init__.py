"""ARGUS UTILS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible CLI flows tested at the command boundary.
- e2e/          : Full CLI runs exercising logging and the flight recorder.

General guidance
- Keep unit fast and deterministic; use ``tmp_path`` for the file helpers.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
