"""Unit test configuration.

Unit tests run against in-memory adapters and tmp_path files only.
"""
