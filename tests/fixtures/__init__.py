"""Shared pytest fixtures for catalog tests."""

from .books import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
