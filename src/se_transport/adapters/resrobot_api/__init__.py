"""ResRobot (nationwide Swedish transit) API adapters."""

from se_transport.adapters.resrobot_api.resrobot_trip_planner import ResRobotTripPlanner

__all__ = ["ResRobotTripPlanner"]
