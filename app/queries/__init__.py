"""Data access: parameterized statements for beans and users, decoded into typed records."""
