"""Syntax of Boolean expressions."""
