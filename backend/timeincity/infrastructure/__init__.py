"""Infrastructure Layer — dataset file IO and logging setup."""
