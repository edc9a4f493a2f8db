"""
Version information for ikilog (tagged debug logger).

This file is the single source of version numbers; setup.py executes
it to get PIP_VERSION.
"""

MAJOR = 2
MINOR = 1
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "ikilog"

# PEP 440 pre-release segments; other phases ("rc1") are used as-is
_PEP440_PHASES = {"alpha": "a0", "beta": "b0"}


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """Return the PEP 440 version, e.g. 2.1.0-beta -> 2.1.0b0."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base += _PEP440_PHASES.get(PHASE, PHASE)
    return base


BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
__version__ = BASE_VERSION
