"""`gnark-tooling` command line."""
