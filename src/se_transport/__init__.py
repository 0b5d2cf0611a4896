"""Swedish transport trip planner: SL, ResRobot, car, taxi, bus and flights."""

__version__ = "0.1.0"
