"""CLI commands for coach-lift."""

from .generate import generate
from .init import init
from .log import log
from .programs import programs
from .serve import serve

__all__ = [
    "generate",
    "init",
    "log",
    "programs",
    "serve",
]
