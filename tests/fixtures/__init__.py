"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration pointing at the record files
    - sample_patients.yaml: Two patient records
    - sample_practitioners.yaml: Two practitioner records, one sparse

Usage:
    Load via the ``fixtures_path`` fixture in conftest.py.
"""
