import sys
print("Python:", sys.executable, sys.version)
try:
    import PySide6
    print("PySide6:", PySide6.__version__)
except ImportError:
    print("PySide6: NOT INSTALLED")
try:
    import pytest
    print("pytest:", pytest.__version__)
except ImportError:
    print("pytest: NOT INSTALLED")
try:
    import pytestqt
    print("pytest-qt:", getattr(pytestqt, "__version__", "installed"))
except ImportError:
    print("pytest-qt: NOT INSTALLED")
