"""Executors for step kinds that need more than an exit status."""
