"""GENIBI service layer."""
