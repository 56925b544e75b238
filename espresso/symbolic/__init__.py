"""Boolean expressions as BDDs."""
