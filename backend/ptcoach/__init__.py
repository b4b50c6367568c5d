"""PT Coach backend package."""
