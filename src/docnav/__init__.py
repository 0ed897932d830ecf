"""Docnav - navigation trees for documentation sites."""
