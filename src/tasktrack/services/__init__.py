"""Services module for tasktrack - client-side business logic."""
