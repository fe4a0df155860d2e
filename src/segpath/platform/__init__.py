"""Platform services shared across segpath layers."""
