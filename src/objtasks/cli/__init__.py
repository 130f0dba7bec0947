"""Objtasks command-line interface."""
