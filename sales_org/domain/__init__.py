"""Business rules for sales rules, kept free of HTTP and persistence concerns."""
