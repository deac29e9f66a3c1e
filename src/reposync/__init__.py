"""Reconcile a folder of checkouts with the repos of a GitHub user or org."""

__version__ = "1.0.0"
