"""Core pool sampling logic, protocols and configuration."""
