"""Pure computations over weight records."""
