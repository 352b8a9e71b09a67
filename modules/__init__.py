"""Script modules of the custom-scripts suite."""
