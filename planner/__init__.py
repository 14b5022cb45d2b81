"""
Planner package - weekly meal plan calendar state, independent of any UI.
"""
