"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and their JSON shape
- errors.py: typed failures raised by the store and the task file
- task_file.py: JSON document persistence
- task_store.py: in-memory authority (ids, create/delete/toggle/list)
- urgency.py: deadline urgency buckets and summary counts
"""
