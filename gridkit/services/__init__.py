"""
Service layer for gridkit.

Everything that suspends lives here: the async data controller, the HTTP row
source, and the binding that re-renders a view when a controller changes.
"""
