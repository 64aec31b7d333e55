"""Configuration classes for ridegraph components."""

from dataclasses import dataclass


@dataclass
class RouteConfig:
    """Configuration for route planning and match scoring."""

    # Match percentage reported for every passenger when the composed route
    # has zero total weight (driver, passengers and destination coincide)
    zero_distance_match: float = 100.0

    # Run an extra relaxation round and fail on negative cycles
    detect_negative_cycles: bool = True

    # Message attached to every route report
    message: str = "Shortest Route for the Driver"

    def __post_init__(self) -> None:
        if not 0.0 <= self.zero_distance_match <= 100.0:
            raise ValueError(
                f"zero_distance_match must be within [0, 100], got {self.zero_distance_match}"
            )


# Global configuration instance
ROUTE_CONFIG = RouteConfig()
