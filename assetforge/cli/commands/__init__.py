"""Individual ``assetforge`` subcommands."""
