"""
Property-based tests for the instruction codec and the code decoder.

This package hosts the Hypothesis strategies and the test entrypoints.
"""
