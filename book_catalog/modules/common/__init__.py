"""Shared domain exceptions and helpers."""
