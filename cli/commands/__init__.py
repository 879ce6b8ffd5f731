"""syx subcommands."""
