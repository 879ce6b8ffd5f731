"""Command line interface for syxpack."""
