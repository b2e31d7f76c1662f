"""TitanFit backend."""
