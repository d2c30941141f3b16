# poetry_camera/gui/__init__.py
"""PySide6 presentation layer."""
