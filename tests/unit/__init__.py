"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with in-memory collaborators.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_filter_rules.py: Rule compilation and matching
    - test_include_filter.py / test_exclude_filter.py: Filter stages
    - test_key_transformer.py: Key renaming
    - test_export_pipeline.py: Per-key orchestration
    - test_config_loader.py: Configuration loading/validation
"""
