"""Pytest configuration and fixtures."""

import random

import pytest
from typer.testing import CliRunner


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random source for reproducible generation."""
    return random.Random(2024)


@pytest.fixture
def runner() -> CliRunner:
    """Return a CLI runner."""
    return CliRunner()


@pytest.fixture
def senha_valida() -> str:
    """Return a password that satisfies every policy rule (8 chars)."""
    return "Xy7!kQ2#"
