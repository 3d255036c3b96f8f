"""Solutions to classic competitive-programming exercises, with a small command line."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "cli", "greedy", "maxheap", "primes", "sequences", "text"]