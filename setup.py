"""
Setup script for the Poetry Camera package.

Usage:
    pip install -e .[test]         # development install
    python3 setup.py py2app        # macOS .app bundle
"""
import sys

from setuptools import setup, find_packages

APP = ['run_gui.py']

OPTIONS = {
    'argv_emulation': False,
    'packages': ['poetry_camera'],
    'includes': [
        'PySide6.QtCore',
        'PySide6.QtWidgets',
        'PySide6.QtGui',
    ],
    'excludes': ['tkinter', 'test', 'distutils'],
    'plist': {
        'CFBundleName': 'Poetry Camera',
        'CFBundleDisplayName': 'Poetry Camera',
        'CFBundleIdentifier': 'local.poetrycamera.app',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0.0',
        'NSHighResolutionCapable': True,
        'LSMinimumSystemVersion': '11.0',
    },
}

# Bundle options only when building the .app
APP_BUNDLE = {}
if 'py2app' in sys.argv:
    APP_BUNDLE = dict(
        app=APP,
        options={'py2app': OPTIONS},
        setup_requires=['py2app'],
    )

setup(
    name='poetry-camera',
    version='1.0.0',
    description='Mobile-style photo/poem application shell with long-press delete and undo',
    packages=find_packages(include=['poetry_camera', 'poetry_camera.*']),
    python_requires='>=3.9',
    install_requires=[
        'PySide6>=6.5',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-qt>=4.2',
        ],
    },
    **APP_BUNDLE,
)
