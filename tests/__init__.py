"""Order Notifier Test Suite.

Test Structure:
- unit/: Unit tests for channels, the channel factory, the manager and the CLI
"""
