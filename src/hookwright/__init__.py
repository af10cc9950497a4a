"""hookwright: plugin loading for test runners."""

__version__ = "0.3.0"
