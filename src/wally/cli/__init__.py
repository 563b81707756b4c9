"""Wally command-line interface."""
