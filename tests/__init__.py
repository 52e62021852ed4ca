"""Tests for the Idle Light Colors integration."""
