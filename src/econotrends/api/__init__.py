"""EconoTrends API - Cross-cutting HTTP routes."""
