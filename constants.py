# constants.py

# =============================================================================
# --- DOMAIN ---
# =============================================================================
DOMAIN_XMIN = 0.0
DOMAIN_YMIN = 0.0
DOMAIN_XMAX = 1.0
DOMAIN_YMAX = 1.0

# =============================================================================
# --- NODE ARENA ---
# =============================================================================
NODE_ARENA_INITIAL_CAPACITY = 64 # Rows allocated before the first growth
NODE_ARENA_GROWTH_FACTOR = 2
NO_CHILD = -1 # Child link value for an empty slot

POINT_SET_INITIAL_CAPACITY = 64
POINT_SET_GROWTH_FACTOR = 2

# =============================================================================
# --- LOGGING ---
# =============================================================================
LOG_PREFIX = "[KdTree]"
LOG_ENABLED = True

# =============================================================================
# --- BENCHMARK & PROFILING ---
# =============================================================================
BENCHMARK_POINT_COUNT = 10000
BENCHMARK_QUERY_COUNT = 1000
BENCHMARK_MAX_RECT_SIDE = 0.1 # Longest side of a random query rectangle, unitless [0, 1]
RANDOM_SEED = 12345
PROFILER_PRINT_LINE_COUNT = 20
