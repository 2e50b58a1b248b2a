# Controller Configuration

# Phase Hold Times (seconds)
NS_GREEN_TIME = 10
NS_YELLOW_TIME = 3
ALL_RED_TIME = 1         # Shared by both all-red slots
EW_GREEN_TIME = 10
EW_YELLOW_TIME = 3
PED_WALK_TIME = 6

# Timing Authority
TICK_SECONDS = 1.0       # Hold slice; bounds shutdown latency
JOIN_TIMEOUT = 5.0       # Seconds to wait for the controller thread on exit
