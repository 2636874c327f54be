"""
tscli test suite
================

Test Modules
------------
- test_models.py: Tests for option models and package manager commands
- test_config.py: Tests for environment-driven settings
- test_version_check.py: Tests for the registry version lookup
- test_package_manager.py: Tests for detection and dependency installs
- test_generator.py: Tests for directory preparation and scaffolding
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_generator.py

    # Run specific test class
    pytest tests/test_generator.py::TestInitProject
"""
