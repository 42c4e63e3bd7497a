"""sportfrei CLI commands."""
