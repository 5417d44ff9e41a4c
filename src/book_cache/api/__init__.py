"""HTTP application and dependency wiring."""
