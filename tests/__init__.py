"""Test suite for the name duplication detector."""
