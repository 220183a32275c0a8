"""
Core state layer: Outcome types, the observable StateCell and the TaskViewModel.
"""
