"""
Default routing configuration for route-request.

This file acts as the baseline control plane:
- street speeds / reluctances
- transit slack and transfer tuning
- rental / parking defaults

The mapper READS a RouteRequest built from this dict (see config.py) but never mutates it.
Keys mirror the RouteRequest model field names.
"""

DEFAULT_ROUTE_REQUEST = {
    "arrive_by": False,
    "wheelchair": False,
    "num_itineraries": 50,
    "locale": "en",
    # ------------------------------------------------------------------
    # Street preferences
    # ------------------------------------------------------------------
    "preferences": {
        "walk": {
            "speed": 1.33,  # m/s
            "reluctance": 2.0,
            "board_cost": 600,  # seconds
            "safety_factor": 1.0,
        },
        "bike": {
            "speed": 5.0,
            "reluctance": 2.0,
            "board_cost": 600,
            "walking_speed": 1.33,
            "walking_reluctance": 5.0,
            "switch_time": 0,
            "switch_cost": 0,
            "optimize_type": "SAFE",
        },
        "car": {
            "reluctance": 2.0,
        },
        "rental": {
            "arriving_in_rental_vehicle_at_destination_cost": 0,
        },
        # ------------------------------------------------------------------
        # Transit tuning
        # ------------------------------------------------------------------
        "transit": {
            "default_board_slack_sec": 0,
            "default_alight_slack_sec": 0,
            "other_than_preferred_routes_penalty": 300,
            "ignore_realtime_updates": False,
        },
        "transfer": {
            "cost": 0,
            "slack": 120,  # seconds
            "wait_reluctance": 1.0,
            "max_transfers": 12,
            "nonpreferred_cost": 180,
        },
        "itinerary_filter": {
            "debug": False,
        },
    },
    "journey": {
        "parking": {
            "unpreferred_cost": 0,
        },
        "rental": {
            # "allowed_networks": [],
            # "banned_networks": [],
        },
    },
}
