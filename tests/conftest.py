"""Pytest fixtures for dbvi tests."""

from tests.fixtures.clients import *
