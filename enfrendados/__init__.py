"""Enfrendados: a two-player terminal dice game, with its rules, dice and console screens."""

__version__ = "1.0.0"