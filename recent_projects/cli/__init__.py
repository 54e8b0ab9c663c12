"""Command-line interface for ide-recent-projects."""
