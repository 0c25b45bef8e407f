import builtins
import os
import sys

import pytest

_tests_dir = os.path.dirname(os.path.abspath(__file__))
_src_dir   = os.path.abspath(os.path.join(_tests_dir, '..'))

# Run against the source tree when the package is not installed.
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)


@pytest.fixture
def bad_things(monkeypatch):
    """Install a ``make_bad_thing`` builtin that records its calls.

    Loaded functions see only the builtins, so this is the hook their
    bodies can reach.
    """
    calls = []
    monkeypatch.setattr(builtins, 'make_bad_thing', calls.append,
                        raising=False)
    return calls
