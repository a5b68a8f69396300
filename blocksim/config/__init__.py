"""Configuration package for the block simulation.

Constants are split by concern (display, simulation, automata) and the
dataclass configuration objects live in ``simulation_config``.
"""
