"""Click subcommands of the pacreview CLI."""
