# slimrand/config.py
# Configuration for default-constructed generators.
# Values are read at construction time, so they may be reassigned at runtime.

# Seed configuration:
# - SEED_MODE:
#     'random' : use os.urandom(ENTROPY_BYTES) (non-deterministic each run)
#     'time'   : use the wall clock, mixed with the pid and a per-process counter
#     'fixed'  : use SEED (if SEED is None, falls back to FALLBACK_SEED)
SEED_MODE = 'random'   # 'random' | 'time' | 'fixed'

# If SEED_MODE == 'fixed', use this seed (int of any width, or bytes).
SEED = None

# If SEED_MODE == 'time', this controls the clock resolution.
# 's' -> seconds, 'ms' -> milliseconds, 'ns' -> nanoseconds
TIME_GRANULARITY = 'ns'  # 's' | 'ms' | 'ns'

# Bytes read from the OS in 'random' mode. 24 bytes cover all six state words.
ENTROPY_BYTES = 24

# Used whenever entropy is unavailable or the mode is unknown.
FALLBACK_SEED = 0xCAFEBABEDEADBEEF

# Logging level for the experiment scripts
LOG_LEVEL = 'INFO'
