"""EconoTrends API routes."""
