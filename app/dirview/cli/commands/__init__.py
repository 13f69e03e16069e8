"""CLI subcommands for dirview."""
