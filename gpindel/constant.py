# largest phred quality score included in log-mismatch tables by default
MAX_QUALITY = 60

# number of integers with a precomputed log10 value
LOG10_CACHE_SIZE = 1024
