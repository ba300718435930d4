"""
Tests for hexastar

This package contains tests for:
- Coordinate geometry and conversions (unit/geometry)
- Search bounds and coordinate systems (unit/spatial)
- Graph export (unit/ops)
- A* pathfinding per coordinate system (pathfinding)
- Public API and policy contracts (contract)
"""
