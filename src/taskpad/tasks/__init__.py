"""
Task subsystem.

Components:
- task_models.py: data structures (Task) and JSON decoding
- validation.py: local form checks run before any network call
- task_repository.py: turns HTTP responses into Outcome values
"""
