"""Test suite for propbag."""
