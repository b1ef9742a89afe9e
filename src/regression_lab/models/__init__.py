"""Linear model fitting and penalty search."""
