"""Race constants: propulsion gains, finish line, weather marginals and defaults."""

# =============================================================================
# Propulsion Gains (distance per day, km)
# =============================================================================

# Wind-only boat (Magellan)
WIND_GAIN_WIND_ONLY = 192

# Wind-or-solar boat (Wrangler): wind takes priority, solar only on calm sunny days
WIND_GAIN_WIND_OR_SOLAR = 144
SOLAR_GAIN_WIND_OR_SOLAR = 120

# =============================================================================
# Course
# =============================================================================

FINISH_LINE = 10_000

# =============================================================================
# Weather Marginals
# =============================================================================

# Sampled uniformly; the share of True entries is the daily probability.
WINDY_DISTRIBUTION = (True, True, False, True)  # 75% windy
SUNNY_DISTRIBUTION = (
    True, False, True, True, True, True, False, False, True, True,
)  # 70% sunny

# =============================================================================
# Randomness
# =============================================================================

# Seeds <= 0 (or None) leave the generator unseeded.
DEFAULT_SEED = 1234

# =============================================================================
# Reporting
# =============================================================================

DEFAULT_FLEET_SIZE = 1000
SAMPLE_SCALE = 10            # plot/report boats // SAMPLE_SCALE vehicles per fleet
REPORT_DAYS = 100            # most boats finish within ~100 days
PROGRESS_LOG_INTERVAL = 25   # ticks between DEBUG progress messages
