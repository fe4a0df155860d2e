"""Configuration package for segpath."""
