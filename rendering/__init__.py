"""Pygame preview for the block simulation (optional, not used headless)."""
