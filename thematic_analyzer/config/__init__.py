"""Configuration management for thematic analyzer."""

from .settings import Settings
from . import lexicon

__all__ = ["Settings", "lexicon"]
