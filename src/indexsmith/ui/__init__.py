"""User interfaces for indexsmith."""
