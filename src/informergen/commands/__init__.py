"""CLI command implementations for informergen.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .init import init
from .plan import inspect, plan

__all__ = ["init", "inspect", "plan"]
