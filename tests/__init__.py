"""Test suite for the projfs project.

This package contains all tests for the projfs project, organized by module:
- core/: Tests for directory, file, path and config handling
- services/: Tests for the zip process and module loading
- utils/: Tests for utility functions
"""
