"""
Test suite for the pylibnoise package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the numeric kernel, modules, noise maps, rendering and CLI
- Integration tests for complete module graphs projected into maps

Run with: pytest
"""
