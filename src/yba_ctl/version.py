"""Version shipped with this controller.

The installation metadata must report the same string before any service is
touched.
"""

CONTROLLER_VERSION = "2.20.0"
