"""Reconciliation building blocks."""
