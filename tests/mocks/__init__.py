"""Mock objects for tests."""
