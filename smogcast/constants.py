"""Shared constants: feature layout, smog levels, training defaults, city table."""

FEATURE_COLUMNS = ["pm25", "temperature", "humidity", "wind_speed", "visibility", "pressure"]

FEATURE_LABELS = {
    "pm25": "PM2.5",
    "temperature": "Temperature",
    "humidity": "Humidity",
    "wind_speed": "Wind Speed",
    "visibility": "Visibility",
    "pressure": "Pressure",
}

FEATURE_UNITS = {
    "pm25": "µg/m³",
    "temperature": "°C",
    "humidity": "%",
    "wind_speed": "m/s",
    "visibility": "km",
    "pressure": "hPa",
}

LABEL_COLUMN = "smog_level"

SMOG_LEVELS = [
    "Good",
    "Moderate",
    "Unhealthy for Sensitive Groups",
    "Unhealthy",
    "Very Unhealthy",
    "Hazardous",
]

SMOG_DESCRIPTIONS = [
    "Air quality is satisfactory",
    "Air quality is acceptable for most people",
    "Members of sensitive groups may experience health effects",
    "Everyone may begin to experience health effects",
    "Health alert: everyone may experience serious health effects",
    "Health warnings of emergency conditions",
]

N_CLASSES = len(SMOG_LEVELS)

# Gradient descent defaults for every one-vs-all unit
LEARNING_RATE = 0.01
L2_PENALTY = 0.01
EPOCHS = 1000
INIT_SCALE = 0.01  # weights start in U(-INIT_SCALE / 2, INIT_SCALE / 2)
SIGMOID_CLIP = 500.0
LOSS_EPS = 1e-15

# US EPA PM2.5 breakpoints: (conc_low, conc_high, aqi_low, aqi_high)
AQI_BREAKPOINTS = [
    (0.0, 12.0, 0, 50),
    (12.1, 35.4, 51, 100),
    (35.5, 55.4, 101, 150),
    (55.5, 150.4, 151, 200),
    (150.5, 250.4, 201, 300),
    (250.5, 500.0, 301, 500),
]

# Upper AQI bound of each smog level; anything above the last is Hazardous
SMOG_AQI_LIMITS = [50, 100, 150, 200, 300]

CITIES = [
    {"name": "Beijing", "base_pm25": 85.0, "base_temp": 12.0},
    {"name": "Delhi", "base_pm25": 95.0, "base_temp": 25.0},
    {"name": "Los Angeles", "base_pm25": 35.0, "base_temp": 20.0},
    {"name": "Mexico City", "base_pm25": 65.0, "base_temp": 18.0},
    {"name": "Bangkok", "base_pm25": 55.0, "base_temp": 28.0},
    {"name": "Lahore", "base_pm25": 105.0, "base_temp": 22.0},
]

DEFAULT_SAMPLES = 2000
DEFAULT_TEST_SIZE = 0.2
