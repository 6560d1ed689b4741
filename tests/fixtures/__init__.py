"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample export configuration

Usage:
    Reference files through the sample_config_path fixture.
"""
