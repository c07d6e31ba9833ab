"""Oh Craps! craps strategy library."""
