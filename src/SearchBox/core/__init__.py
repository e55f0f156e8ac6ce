"""Core data model: tokens, literals and formulas."""
