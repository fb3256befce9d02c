# Range the two RSA primes are drawn from (inclusive).
PRIME_MIN = 100
PRIME_MAX = 1000

# Largest prime bound a web client may ask for; CheckPrime is trial division.
PRIME_CEILING = 100_000

# Upper bound on random draws before the prime search gives up.
MAX_PRIME_ATTEMPTS = 10_000
