"""Source generators driven by the compiled field rules."""
