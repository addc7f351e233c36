"""Runnable demos; each subpackage runs with `python -m glsketch.demos.<name>`."""
