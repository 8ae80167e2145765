"""Tests - MinRoot folding and constraint-polynomial test suite."""
