"""
Integration Tests - End-to-End Runs.

These tests verify that all components work together correctly.
They drive run_action through InMemoryHost and GitHubActionsHost, and
the command line entry point.

Test Files:
    - test_action_run.py: Full action workflow
    - test_cli.py: Command line interface
"""
