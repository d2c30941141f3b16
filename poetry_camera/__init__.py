# poetry_camera/__init__.py
"""
Poetry Camera - mobile-style photo/poem application shell.
"""

__version__ = "1.0.0"
