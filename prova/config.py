# Named group used when no explicit (p, g, q) is given
DEFAULT_GROUP = "demo"

# Generators whose order q is composite are only checked for exact order
# when q is at most this many bits (sympy has to factor q)
ORDER_CHECK_MAX_BITS = 128

# Evaluation defaults
EVALUATION_SESSIONS = 100
EVALUATION_CONCURRENCY = 8
EVALUATION_OUTPUT = "output/session_results.csv"
