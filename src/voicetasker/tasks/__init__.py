"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, StatusFilter)
- task_store.py: volatile in-memory storage owned by one session
- task_resolver.py: free-text identifier -> task (first substring match)
"""
