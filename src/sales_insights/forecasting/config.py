"""Configuration constants for the forecasting engine."""

# Monthly metrics that can be forecast
METRICS = ["total_value", "total_sales"]

# Forecast horizon bounds (months ahead)
MIN_HORIZON = 1
MAX_HORIZON = 24
DEFAULT_PERIODS = 3

# Minimum number of historical months accepted by the engine
MIN_HISTORY = 3

# Moving average window (months)
MOVING_AVERAGE_WINDOW = 3

# Seasonal period for Holt-Winters when at least a full year is available
SEASONAL_PERIOD = 12

# Holt-Winters smoothing constants (level, trend, seasonal)
ALPHA = 0.3
BETA = 0.1
GAMMA = 0.2

# Method identifiers, in the order results are returned
METHOD_LINEAR = "linear"
METHOD_MOVING_AVERAGE = "moving_average"
METHOD_HOLT_WINTERS = "holt_winters"
METHODS = [METHOD_LINEAR, METHOD_MOVING_AVERAGE, METHOD_HOLT_WINTERS]

# Label of the leading chart row
CURRENT_LABEL = "current"
