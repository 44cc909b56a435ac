"""Small conversion helpers shared by the CLI and the models."""
