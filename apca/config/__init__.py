"""
Connection configuration for the Alpaca API.

Provides the immutable ApiInfo value, its constructors, and the process-level
accessor that loads it from the environment (and .env files).
"""
