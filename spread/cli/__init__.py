"""Command-line and terminal UI front-ends for Spread."""
