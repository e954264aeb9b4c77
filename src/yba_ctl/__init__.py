"""
yba-ctl: service control for a YugabyteDB Anywhere installation.

This package provides the ``start``, ``stop`` and ``restart`` commands that
drive the local services of an installation in a fixed order.
"""

from yba_ctl.version import CONTROLLER_VERSION

__version__ = CONTROLLER_VERSION
