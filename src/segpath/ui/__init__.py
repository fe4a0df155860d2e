"""User interface layers for segpath."""
