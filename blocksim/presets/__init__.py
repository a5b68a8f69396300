"""Ready-made automaton presets."""
