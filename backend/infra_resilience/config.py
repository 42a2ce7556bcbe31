# backend/infra_resilience/config.py

import os

RESIDENTIAL = "residential"

NODE_TYPES = [
    "power_generation",
    "water_infrastructure",
    "fuel_supply",
    "food_source",
    "emergency_services",
    RESIDENTIAL,
]

# Event type -> node types that fail directly.
EVENT_PRIMARY_TYPES = {
    "deep_freeze": ["fuel_supply"],
    "flood": ["water_infrastructure"],
    "power_surge": ["power_generation"],
    "earthquake": ["fuel_supply", "power_generation"],
    "custom": ["power_generation"],
}

EVENT_TYPES = list(EVENT_PRIMARY_TYPES)

SEVERITY_MIN = 1
SEVERITY_MAX = 10

# Severity bands for primary failure selection.
HIGH_SEVERITY = 7
MEDIUM_SEVERITY = 4
MEDIUM_FAILURE_FRACTION = 0.66

DEFAULT_SEVERITIES = [2, 5, 9]

DEFAULT_SEED_PATH = os.environ.get(
    "INFRA_SEED_PATH",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "austin.json"),
)
