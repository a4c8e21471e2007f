"""
RobotsForge package initializer.
Defines package version and exposes the core API and CLI.
"""
__version__ = "0.1.0"

from robots_forge.evaluator import evaluate
from robots_forge.matcher import matches
from robots_forge.models import ALL_BOTS, Permission, RobotRule, Sitemap
from robots_forge.ruleset import RuleSet
from robots_forge.serializer import serialize
from robots_forge.validator import validate

from .cli import cli  # экспорт для pytest

__all__ = [
    "ALL_BOTS",
    "Permission",
    "RobotRule",
    "RuleSet",
    "Sitemap",
    "cli",
    "evaluate",
    "matches",
    "serialize",
    "validate",
]
